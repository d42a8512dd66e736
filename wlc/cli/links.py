"""Links Typer app factory."""

import typer

from wlc.api.links.cmd_clean import cmd_clean
from wlc.api.links.cmd_clean_file import cmd_clean_file
from wlc.api.links.cmd_empty import cmd_empty
from wlc.api.links.cmd_orphans import cmd_orphans
from wlc.api.links.cmd_scan import cmd_scan
from wlc.api.links.cmd_show import cmd_show

from ._handle_stage_result import handle_stage_result

CLEAN_WARNING = (
    "This will remove all broken links listed in your broken links file from all markdown files "
    "in your vault. This action cannot be undone. Make sure you have a backup! Continue?"
)


def links() -> typer.Typer:
    """Create and configure the links Typer app."""
    app = typer.Typer(
        name="links",
        help="Broken link, orphan and empty note maintenance",
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

    @app.command(name="scan")
    def scan_cmd(ctx: typer.Context) -> None:
        """Scan vault and generate the broken links file."""
        handle_stage_result(cmd_scan, ctx)()

    @app.command(name="clean")
    def clean_cmd(
        ctx: typer.Context,
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    ) -> None:
        """Clean broken links from every document in the vault."""
        if not yes and not typer.confirm(CLEAN_WARNING, default=False, err=True):
            typer.echo("Cleanup cancelled.", err=True)
            raise typer.Exit(code=1)
        handle_stage_result(cmd_clean, ctx)()

    @app.command(name="clean-file")
    def clean_file_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Document to clean (vault-relative or absolute path)"),
    ) -> None:
        """Clean broken links from a single document."""
        handle_stage_result(cmd_clean_file, ctx)(path)

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        limit: int = typer.Option(10, "--limit", "-n", min=1, help="Number of broken links to preview"),
    ) -> None:
        """Show the broken links loaded from the broken links file."""
        handle_stage_result(cmd_show, ctx)(limit)

    @app.command(name="orphans")
    def orphans_cmd(
        ctx: typer.Context,
        save: bool = typer.Option(False, "--save", "-s", help="Save a dated report into the vault"),
    ) -> None:
        """Find documents with no incoming links."""
        handle_stage_result(cmd_orphans, ctx)(save)

    @app.command(name="empty")
    def empty_cmd(
        ctx: typer.Context,
        save: bool = typer.Option(False, "--save", "-s", help="Save a dated report into the vault"),
    ) -> None:
        """Find documents whose content is blank."""
        handle_stage_result(cmd_empty, ctx)(save)

    return app
