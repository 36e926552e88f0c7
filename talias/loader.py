"""Options file location and loading."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from talias.common.env import parse_path_env
from talias.common.errors import ConfigurationError, wrap_error
from talias.models import Node

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TALIAS_CONFIG"
CONFIG_DIR_NAME = ".talias"
CONFIG_FILE_NAME = "options.json"

_OPTIONS_ADAPTER: TypeAdapter[tuple[Node, ...]] = TypeAdapter(tuple[Node, ...])


def resolve_home() -> Path:
    """Return the current user's home directory or raise ConfigurationError."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise wrap_error(
            ConfigurationError, f"Error getting home directory: {exc}", cause=exc
        ) from exc


def default_config_path() -> Path:
    return resolve_home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def resolve_config_path(explicit: Path | str | None = None) -> Path:
    """Pick the options file: explicit path, then $TALIAS_CONFIG, then the default."""
    if explicit is not None:
        return Path(explicit).expanduser()
    env_path = parse_path_env(os.environ.get(CONFIG_ENV_VAR))
    if env_path:
        return Path(env_path).expanduser()
    return default_config_path()


def parse_options(data: str | bytes, *, source: str = "<string>") -> tuple[Node, ...]:
    """Decode a JSON array of option nodes."""
    try:
        return _OPTIONS_ADAPTER.validate_json(data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Error loading options: failed to parse JSON in {source}: {exc}",
            context={"path": source, "errors": exc.error_count()},
            cause=exc,
        ) from exc


def load_options(path: Path | str) -> tuple[Node, ...]:
    """Read and decode the options file at ``path``."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ConfigurationError(
            f"Error loading options: failed to read file {path}: {exc}",
            context={"path": path},
            cause=exc,
        ) from exc
    options = parse_options(data, source=str(path))
    logger.debug("Loaded %d top-level options from %s", len(options), path)
    return options


def load_default_options(explicit: Path | str | None = None) -> tuple[Node, ...]:
    return load_options(resolve_config_path(explicit))
