from __future__ import annotations

from typing import List

import typer

from talias.cli.context import CLIContext
from talias.common.errors import SelectionError, TaliasError
from talias.core.emitter import emit
from talias.core.tree import find_by_titles


def register_pick_command(app: typer.Typer, ctx: CLIContext) -> None:
    @app.command("pick")
    def pick(
        titles: List[str] = typer.Argument(
            ..., help="Titles leading to the option, e.g. Work 'Proj A'."
        ),
    ) -> None:
        """Emit the command of the option at TITLES without opening the menu."""
        try:
            node = find_by_titles(ctx.options(), titles)
            path = " > ".join(titles)
            if node is None:
                raise SelectionError(f"No option at {path}", context={"path": titles})
            if node.children:
                raise SelectionError(f"{path} is a group, not a command", context={"path": titles})
            if not node.command:
                raise SelectionError(f"{path} has no command", context={"path": titles})
        except TaliasError as exc:
            ctx.fail(exc)
        emit(node)
