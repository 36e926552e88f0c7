"""Pure helpers over the immutable option tree."""

from __future__ import annotations

from typing import Sequence

from talias.models import Node

MAIN_MENU_TITLE = "Main Menu"


def flatten(tree: Sequence[Node]) -> list[Node]:
    """Return every leaf of ``tree`` in depth-first document order.

    Groups are never part of the result, even when they carry a command.
    """
    result: list[Node] = []
    for node in tree:
        if node.children:
            result.extend(flatten(node.children))
        else:
            result.append(node)
    return result


def same_titles(left: Sequence[Node], right: Sequence[Node]) -> bool:
    """Structural equality used to recognise a sibling list: length and titles."""
    if len(left) != len(right):
        return False
    return all(a.title == b.title for a, b in zip(left, right))


def title_for_siblings(root: Sequence[Node], siblings: Sequence[Node]) -> str:
    """Title of the first top-level group whose children match ``siblings``.

    Only direct children of the root are considered; anything else falls back
    to the main menu title. Identical sibling lists resolve to the first group.
    """
    for node in root:
        if node.children and same_titles(node.children, siblings):
            return node.title
    return MAIN_MENU_TITLE


def find_by_titles(tree: Sequence[Node], titles: Sequence[str]) -> Node | None:
    """Walk ``titles`` from the root, taking the first exact match per level."""
    level: Sequence[Node] = tree
    found: Node | None = None
    for segment in titles:
        found = next((node for node in level if node.title == segment), None)
        if found is None:
            return None
        level = found.children
    return found
