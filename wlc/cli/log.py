"""Log Typer app factory."""

import typer

from wlc.api.log.cmd_prune import cmd_prune
from wlc.api.log.cmd_status import cmd_status

from ._handle_stage_result import handle_stage_result


def log() -> typer.Typer:
    """Create and configure the log Typer app."""
    app = typer.Typer(
        name="log",
        help="Unified logfile",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Show retained log entries after pruning expired ones."""
        handle_stage_result(cmd_status, ctx)()

    @app.command(name="prune")
    def prune_cmd(ctx: typer.Context) -> None:
        """Remove log entries older than their retention period."""
        handle_stage_result(cmd_prune, ctx)()

    return app
