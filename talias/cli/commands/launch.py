from __future__ import annotations

import logging
from typing import Callable

from talias.cli.context import CLIContext
from talias.common.errors import TaliasError
from talias.core.controller import LauncherController
from talias.core.emitter import emit
from talias.tui import launcher_screen
from talias.tui.launcher_screen import LauncherScreen

logger = logging.getLogger(__name__)

ScreenFactory = Callable[[LauncherController], LauncherScreen]


def run_launcher(ctx: CLIContext, screen_factory: ScreenFactory | None = None) -> None:
    """Load options, run the interactive menu and emit the chosen command."""
    try:
        options = ctx.options()
        launcher_screen.require_terminal()
    except TaliasError as exc:
        ctx.fail(exc)

    controller = LauncherController(options)
    factory = screen_factory or LauncherScreen
    node = factory(controller).run()
    if node is None:
        logger.debug("Launcher closed without a selection")
        return
    emit(node)
