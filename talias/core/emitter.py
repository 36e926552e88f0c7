"""Hands the chosen command back to the calling shell via stdout."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from talias.models import Node

logger = logging.getLogger(__name__)

HOME_SHORTHAND = "~/"


def _home_directory() -> str | None:
    try:
        return str(Path.home())
    except (RuntimeError, KeyError) as exc:
        logger.warning("Cannot resolve home directory, leaving command as is: %s", exc)
        return None


def expand_command(command: str, home: str | None = None) -> str:
    """Replace every ``~/`` in ``command`` with the home directory path.

    This is plain text substitution: a bare ``~`` or ``~user`` is left alone.
    If the home directory is unknown the command is returned unchanged.
    """
    if HOME_SHORTHAND not in command:
        return command
    if home is None:
        home = _home_directory()
        if home is None:
            return command
    prefix = os.path.normpath(home) + os.sep
    return command.replace(HOME_SHORTHAND, prefix)


def emit(node: Node, stream: TextIO | None = None, *, home: str | None = None) -> str | None:
    """Write the expanded command of ``node`` without a trailing newline.

    Returns the emitted text, or None when the node has no command.
    """
    if not node.command:
        return None
    expanded = expand_command(node.command, home=home)
    out = stream if stream is not None else sys.stdout
    out.write(expanded)
    out.flush()
    logger.debug("Emitted command for %r", node.title)
    return expanded
