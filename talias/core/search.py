"""Title search over the flattened leaf index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from talias.core.tree import flatten
from talias.models import Node


def filter_by_title(query: str, index: Sequence[Node]) -> list[Node]:
    """Case-insensitive substring match on titles, preserving index order."""
    if not query:
        return list(index)
    needle = query.lower()
    return [node for node in index if needle in node.title.lower()]


@dataclass
class SearchState:
    flat_index: tuple[Node, ...]
    query: str = ""
    results: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.results = filter_by_title(self.query, self.flat_index)

    @classmethod
    def from_tree(cls, tree: Sequence[Node]) -> "SearchState":
        return cls(flat_index=tuple(flatten(tree)))

    def reset(self) -> None:
        self.set_query("")

    def set_query(self, query: str) -> None:
        self.query = query
        self.results = filter_by_title(query, self.flat_index)
