import logging
from pathlib import Path

import pytest

from talias.common.env import parse_bool_env, parse_path_env
from talias.common.errors import ConfigurationError, TaliasError, wrap_error
from talias.common.logging import configure_logging

pytestmark = pytest.mark.unit_common


def test_error_context_is_json_friendly() -> None:
    cause = OSError("denied")
    err = wrap_error(
        ConfigurationError,
        "cannot read",
        context={"path": Path("/tmp/x.json"), "titles": ("a", "b")},
        cause=cause,
    )
    assert isinstance(err, TaliasError)
    assert err.__cause__ is cause
    assert err.to_dict() == {
        "type": "ConfigurationError",
        "message": "cannot read",
        "context": {"path": "/tmp/x.json", "titles": ["a", "b"]},
    }


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, None), ("1", True), (" Yes ", True), ("off", False), ("", False)],
)
def test_parse_bool_env(raw, expected) -> None:
    assert parse_bool_env(raw) is expected


def test_parse_path_env() -> None:
    assert parse_path_env(None) is None
    assert parse_path_env("   ") is None
    assert parse_path_env(" ~/x.json ") == "~/x.json"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_defaults_to_warning(restore_root_logger, monkeypatch) -> None:
    monkeypatch.delenv("TALIAS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TALIAS_LOG_FILE", raising=False)
    configure_logging(force=True)
    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1


def test_configure_logging_env_level_and_file(restore_root_logger, monkeypatch, tmp_path: Path) -> None:
    log_file = tmp_path / "talias.log"
    monkeypatch.setenv("TALIAS_LOG_LEVEL", "info")
    monkeypatch.setenv("TALIAS_LOG_FILE", str(log_file))
    configure_logging(force=True)
    assert restore_root_logger.level == logging.INFO

    logging.getLogger("talias.test").info("hello from test")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text()


def test_configure_logging_debug_wins(restore_root_logger) -> None:
    configure_logging(level="error", debug=True, force=True)
    assert restore_root_logger.level == logging.DEBUG


def test_configure_logging_force_closes_previous_handlers(restore_root_logger, tmp_path: Path) -> None:
    previous = logging.FileHandler(tmp_path / "old.log")
    restore_root_logger.addHandler(previous)

    configure_logging(force=True)

    assert previous not in restore_root_logger.handlers
    assert previous.stream is None
