"""Menu navigation state: current siblings plus a back stack."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from talias.core.tree import MAIN_MENU_TITLE, title_for_siblings
from talias.models import Node

logger = logging.getLogger(__name__)


@dataclass
class NavigationState:
    root: tuple[Node, ...]
    current: tuple[Node, ...] = field(init=False)
    stack: list[tuple[Node, ...]] = field(init=False)
    title: str = field(init=False)

    def __post_init__(self) -> None:
        self.root = tuple(self.root)
        self.current = self.root
        self.stack = []
        self.title = MAIN_MENU_TITLE

    @property
    def at_root(self) -> bool:
        return not self.stack

    def descend(self, node: Node) -> bool:
        """Enter ``node`` if it is a group; return False for leaves."""
        if not node.children:
            return False
        self.stack.append(self.current)
        self.current = node.children
        self.title = node.title
        logger.debug("Entered group %r (depth %d)", node.title, len(self.stack))
        return True

    def back(self) -> bool:
        """Restore the previous level; return False when already at the top."""
        if not self.stack:
            return False
        self.current = self.stack.pop()
        if self.stack:
            self.title = title_for_siblings(self.root, self.current)
        else:
            self.title = MAIN_MENU_TITLE
        logger.debug("Back to %r (depth %d)", self.title, len(self.stack))
        return True
