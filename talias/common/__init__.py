"""Shared helpers (errors, logging, environment parsing)."""

from talias.common.env import parse_bool_env, parse_path_env
from talias.common.errors import (
    ConfigurationError,
    SelectionError,
    TaliasError,
    TerminalError,
    wrap_error,
)
from talias.common.logging import configure_logging

__all__ = [
    "ConfigurationError",
    "SelectionError",
    "TaliasError",
    "TerminalError",
    "configure_logging",
    "parse_bool_env",
    "parse_path_env",
    "wrap_error",
]
