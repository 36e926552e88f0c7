"""Launcher state machine and key routing, independent of any widget toolkit.

The screen forwards key names (``"q"``, ``"escape"``, ``"up"``, ...) and text
changes here; the controller mutates a single :class:`LauncherState` and tells
the caller what to do next through an :class:`Outcome`.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Sequence

from talias.core.navigation import NavigationState
from talias.core.search import SearchState
from talias.models import Node

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome! Select an option."
SEARCH_MESSAGE = "Search mode - type to filter options"


class Outcome(enum.Enum):
    PASS = "pass"  # not consumed, the focused widget handles it
    HANDLED = "handled"
    QUIT = "quit"
    SELECTED = "selected"


class Focus(enum.Enum):
    LIST = "list"
    INPUT = "input"


def level_message(title: str) -> str:
    return f"Select an option from {title}"


@dataclass
class LauncherState:
    navigation: NavigationState
    search: SearchState
    search_mode: bool = False
    focus: Focus = Focus.LIST
    selected_index: int = 0
    message: str | None = WELCOME_MESSAGE
    result: Node | None = None


class LauncherController:
    def __init__(self, root: Sequence[Node]) -> None:
        self.state = LauncherState(
            navigation=NavigationState(tuple(root)),
            search=SearchState.from_tree(root),
        )

    @property
    def visible(self) -> Sequence[Node]:
        """Nodes shown in the list for the current mode."""
        if self.state.search_mode:
            return self.state.search.results
        return self.state.navigation.current

    @property
    def title(self) -> str:
        return self.state.navigation.title

    @property
    def selected_node(self) -> Node | None:
        nodes = self.visible
        idx = self.state.selected_index
        if 0 <= idx < len(nodes):
            return nodes[idx]
        return None

    def details_text(self) -> str:
        """Text for the detail pane: a pending message or the selection's details."""
        if self.state.message is not None:
            return self.state.message
        node = self.selected_node
        return node.details if node is not None else ""

    def move(self, delta: int) -> None:
        count = len(self.visible)
        if not count:
            self.state.selected_index = 0
            return
        self.state.selected_index = max(0, min(self.state.selected_index + delta, count - 1))
        self.state.message = None

    def activate(self, index: int | None = None) -> Outcome:
        """Activate the node at ``index`` (default: the selected one)."""
        nodes = self.visible
        idx = self.state.selected_index if index is None else index
        if not 0 <= idx < len(nodes):
            return Outcome.HANDLED
        node = nodes[idx]
        if not self.state.search_mode and self.state.navigation.descend(node):
            self.state.selected_index = 0
            self.state.message = level_message(self.title)
            return Outcome.HANDLED
        if not node.command:
            return Outcome.HANDLED
        self.state.result = node
        return Outcome.SELECTED

    def back(self) -> Outcome:
        if not self.state.navigation.back():
            return Outcome.QUIT
        self.state.selected_index = 0
        self.state.message = level_message(self.title)
        return Outcome.HANDLED

    def enter_search(self) -> None:
        self.state.search_mode = True
        self.state.search.reset()
        self.state.focus = Focus.INPUT
        self.state.selected_index = 0
        self.state.message = SEARCH_MESSAGE
        logger.debug("Search mode on")

    def exit_search(self) -> None:
        self.state.search_mode = False
        self.state.search.reset()
        self.state.focus = Focus.LIST
        self.state.selected_index = 0
        self.state.message = level_message(self.title)
        logger.debug("Search mode off, back at %r", self.title)

    def set_query(self, query: str) -> None:
        if query == self.state.search.query:
            return
        self.state.search.set_query(query)
        self.state.selected_index = 0

    def type_char(self, char: str) -> str:
        """Move focus to the search input and append ``char`` to the query."""
        self.state.focus = Focus.INPUT
        self.set_query(self.state.search.query + char)
        return self.state.search.query

    def toggle_focus(self) -> None:
        if not self.state.search_mode:
            return
        self.state.focus = Focus.LIST if self.state.focus is Focus.INPUT else Focus.INPUT

    def handle_key(self, key: str) -> Outcome:
        """Route a key press; global bindings are checked in priority order."""
        state = self.state
        if key == "q":
            return Outcome.QUIT
        if key == "?" and not state.search_mode:
            self.enter_search()
            return Outcome.HANDLED
        if key == "escape":
            if state.search_mode:
                self.exit_search()
                return Outcome.HANDLED
            return self.back()
        if key == "up":
            self.move(-1)
            return Outcome.HANDLED
        if key == "down":
            self.move(1)
            return Outcome.HANDLED
        if key == "enter":
            return self.activate()
        if state.search_mode and state.focus is Focus.LIST and _is_printable(key):
            self.type_char(key)
            return Outcome.HANDLED
        return Outcome.PASS


def _is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()
