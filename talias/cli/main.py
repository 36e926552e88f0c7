"""
Command-line interface for talias.

Without a subcommand it opens the interactive menu; the chosen command is
printed to stdout for a shell wrapper (see `talias shell-init`) to evaluate.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from talias import __version__
from talias.cli.commands.launch import run_launcher
from talias.cli.commands.pick import register_pick_command
from talias.cli.commands.search import register_search_command
from talias.cli.commands.shell import register_shell_command
from talias.cli.commands.show import register_show_command
from talias.cli.context import CLIContext
from talias.common.logging import configure_logging

ctx_store = CLIContext()

app = typer.Typer(
    help="Pick a command from your ~/.talias/options.json menu.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"talias {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Options file to load (default: $TALIAS_CONFIG or ~/.talias/options.json).",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging on stderr."),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (overrides TALIAS_LOG_LEVEL)."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Open the menu, or run one of the subcommands."""
    configure_logging(level=log_level, debug=debug, force=True)
    ctx_store.reset(config)

    if ctx.invoked_subcommand is None:
        run_launcher(ctx_store)


register_pick_command(app, ctx_store)
register_search_command(app, ctx_store)
register_show_command(app, ctx_store)
register_shell_command(app)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
