"""Create the main Typer CLI app."""

import typer

from .config import config
from .links import links
from .log import log


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="WLC - Wiki Link Cleaner",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(links(), name="links")
    app.add_typer(config(), name="config")
    app.add_typer(log(), name="log")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        from wlc.api.config.WLCConfig import WLCConfig
        from wlc.utils.logger import configure_logging

        try:
            level = WLCConfig.load().log.level
        except ValueError:
            level = "INFO"
        configure_logging(WLCConfig.get_home_dir(), level)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
