"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    The app runs in typer's standalone mode, which reports usage errors
    (exit 2) and aborted prompts (exit 1) itself; every exit arrives here as
    ``SystemExit``.
    """
    import typer

    from wlc.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from wlc.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"wlc {result.output.get('version', 'unknown')}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="wlc")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
