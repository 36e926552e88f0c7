from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from talias.common.errors import TaliasError
from talias.loader import load_default_options
from talias.models import Node
from talias.tui import theme

logger = logging.getLogger(__name__)


@dataclass
class CLIContext:
    """Per-invocation state shared by the commands, loaded lazily."""

    config_path: Optional[Path] = None
    _options: Optional[tuple[Node, ...]] = None
    _console: Optional[Console] = None
    _err_console: Optional[Console] = None

    def reset(self, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path
        self._options = None

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console()
        return self._console

    @property
    def err_console(self) -> Console:
        if self._err_console is None:
            self._err_console = Console(stderr=True)
        return self._err_console

    def options(self) -> tuple[Node, ...]:
        if self._options is None:
            self._options = load_default_options(self.config_path)
        return self._options

    def fail(self, exc: TaliasError) -> NoReturn:
        """Report ``exc`` on stderr and stop with a non-zero status."""
        logger.debug("Command failed: %s", json.dumps(exc.to_dict(), sort_keys=True))
        self.err_console.print(
            theme.presenter_message("error", escape(str(exc))), highlight=False
        )
        raise typer.Exit(1)
