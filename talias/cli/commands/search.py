from __future__ import annotations

import typer

from talias.cli.context import CLIContext
from talias.common.errors import TaliasError
from talias.core.search import SearchState


def register_search_command(app: typer.Typer, ctx: CLIContext) -> None:
    @app.command("search")
    def search(
        query: str = typer.Argument("", help="Case-insensitive text to look for in titles."),
    ) -> None:
        """List runnable options whose title contains QUERY, one per line."""
        try:
            state = SearchState.from_tree(ctx.options())
        except TaliasError as exc:
            ctx.fail(exc)
        state.set_query(query)
        for node in state.results:
            typer.echo(f"{node.title}\t{node.command}")
