"""Full-screen launcher built on prompt_toolkit.

All state lives in :class:`~talias.core.controller.LauncherController`; this
module only renders it and forwards key presses.
"""

from __future__ import annotations

import sys
from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.document import Document
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.containers import AnyContainer, DynamicContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output, create_output
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea
from rich.console import Console
from rich.text import Text

from talias.common.errors import TerminalError
from talias.core.controller import Focus, LauncherController, Outcome
from talias.models import Node
from talias.tui import theme

DETAILS_HEIGHT = 5


class LauncherScreen:
    def __init__(
        self,
        controller: LauncherController,
        *,
        title: str = "talias",
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self._controller = controller
        self._console = Console(force_terminal=True)

        self.search = TextArea(
            height=1,
            prompt="Search: ",
            style="class:search",
            multiline=False,
        )
        self.list_control = FormattedTextControl(
            self._render_list,
            focusable=True,
            show_cursor=False,
            get_cursor_position=self._list_cursor,
        )
        self.details_control = FormattedTextControl(self._render_details)
        self.list_window = Window(self.list_control)

        title_window = Window(
            content=FormattedTextControl(self._render_title),
            height=1,
            style="class:title",
        )
        lower_rows: list[AnyContainer] = [
            self.list_window,
            Window(height=1, char="-", style="class:separator"),
            Window(self.details_control, height=DETAILS_HEIGHT, wrap_lines=True),
        ]
        normal_body = HSplit([title_window, *lower_rows])
        search_body = HSplit([title_window, self.search, *lower_rows])

        def body() -> AnyContainer:
            return search_body if self._controller.state.search_mode else normal_body

        root_container = Frame(DynamicContainer(body), title=title)
        self._app: Application[Node | None] = Application(
            layout=Layout(root_container, focused_element=self.list_window),
            key_bindings=self._bindings(),
            style=Style.from_dict(dict(theme.prompt_toolkit_launcher_style())),
            full_screen=True,
            input=input,
            output=output or create_output(always_prefer_tty=True),
        )
        # Delay before a lone escape byte counts as the Escape key.
        self._app.ttimeoutlen = 0.05

        self.search.buffer.on_text_changed += lambda _: self._on_query_changed()

    @property
    def app(self) -> Application[Node | None]:
        return self._app

    def run(self) -> Node | None:
        """Run the event loop; return the chosen leaf or None on quit."""
        return self._app.run()

    def _on_query_changed(self) -> None:
        self._controller.set_query(self.search.text)
        self._app.invalidate()

    def _render_title(self) -> str:
        return self._controller.title

    def _list_cursor(self) -> Point:
        return Point(x=0, y=self._controller.state.selected_index)

    def _render_list(self) -> list[tuple[str, str]]:
        nodes = self._controller.visible
        if not nodes:
            return [("class:empty", "No matching options\n")]
        selected = self._controller.state.selected_index
        frags: list[tuple[str, str]] = []
        for idx, node in enumerate(nodes):
            label = f"{theme.GROUP_MARKER}{node.title}" if node.children else node.title
            style = "class:selected" if idx == selected else ("class:group" if node.children else "")
            frags.append((style, f" {label}\n"))
        return frags

    def _render_details(self) -> ANSI:
        text = self._controller.details_text()
        if not text:
            return ANSI("")
        with self._console.capture() as cap:
            self._console.print(Text(text))
        return ANSI(cap.get())

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()
        state = self._controller.state

        not_searching = Condition(lambda: not state.search_mode)
        list_has_focus_in_search = Condition(
            lambda: state.search_mode and state.focus is Focus.LIST
        )

        @kb.add("q")
        def _(event: Any) -> None:
            self._dispatch("q")

        @kb.add("?", filter=not_searching)
        def _(event: Any) -> None:
            self._dispatch("?")

        @kb.add("escape")
        def _(event: Any) -> None:
            self._dispatch("escape")

        @kb.add("up")
        def _(event: Any) -> None:
            self._dispatch("up")

        @kb.add("down")
        def _(event: Any) -> None:
            self._dispatch("down")

        @kb.add("enter")
        def _(event: Any) -> None:
            self._dispatch("enter")

        @kb.add("tab")
        def _(event: Any) -> None:
            self._controller.toggle_focus()
            self._sync_widgets()

        @kb.add("c-c")
        def _(event: Any) -> None:
            self._exit(None)

        @kb.add("<any>", filter=list_has_focus_in_search)
        def _(event: Any) -> None:
            self._dispatch(event.data)

        return kb

    def _dispatch(self, key: str) -> Outcome:
        outcome = self._controller.handle_key(key)
        if outcome is Outcome.QUIT:
            self._exit(None)
        elif outcome is Outcome.SELECTED:
            self._exit(self._controller.state.result)
        elif outcome is Outcome.HANDLED:
            self._sync_widgets()
        return outcome

    def _sync_widgets(self) -> None:
        """Bring the input buffer and focus in line with the controller state."""
        state = self._controller.state
        query = state.search.query
        if self.search.text != query:
            self.search.buffer.document = Document(query, len(query))
        if state.search_mode and state.focus is Focus.INPUT:
            self._app.layout.focus(self.search)
        else:
            self._app.layout.focus(self.list_window)
        self._app.invalidate()

    def _exit(self, result: Node | None) -> None:
        if self._app.is_running and not self._app.future.done():
            self._app.exit(result=result)


def require_terminal() -> None:
    """Raise TerminalError unless a user can interact with the launcher."""
    if not sys.stdin.isatty():
        raise TerminalError("talias needs an interactive terminal on stdin")
    if not (sys.stdout.isatty() or sys.stderr.isatty()):
        raise TerminalError("talias needs a terminal to draw on (stdout or stderr)")
