from __future__ import annotations

from typing import Sequence

import typer
from rich.text import Text
from rich.tree import Tree

from talias.cli.context import CLIContext
from talias.common.errors import TaliasError
from talias.core.tree import MAIN_MENU_TITLE
from talias.models import Node
from talias.tui import theme


def build_tree(options: Sequence[Node], *, details: bool = False) -> Tree:
    """Render the option tree as a rich Tree."""
    root = Tree(Text(MAIN_MENU_TITLE, style=theme.RICH_ACCENT_BOLD))
    _add_nodes(root, options, details)
    return root


def _add_nodes(branch: Tree, nodes: Sequence[Node], details: bool) -> None:
    for node in nodes:
        if node.children:
            label = Text(f"{theme.GROUP_MARKER}{node.title}", style=theme.TREE_GROUP_STYLE)
        else:
            label = Text(node.title)
            if node.command:
                label.append(f"  {node.command}", style=theme.TREE_COMMAND_STYLE)
        if details and node.details:
            label.append(f"\n{node.details}", style="italic")
        child = branch.add(label)
        if node.children:
            _add_nodes(child, node.children, details)


def register_show_command(app: typer.Typer, ctx: CLIContext) -> None:
    @app.command("show")
    def show(
        details: bool = typer.Option(False, "--details", "-d", help="Include descriptions."),
    ) -> None:
        """Print the configured option tree."""
        try:
            options = ctx.options()
        except TaliasError as exc:
            ctx.fail(exc)
        ctx.console.print(build_tree(options, details=details))
