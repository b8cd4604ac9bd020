from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, and log file rotation logic.
"""

import logging
import time
from pathlib import Path

import pytest

from assetgen.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from assetgen.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from assetgen.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    _reset()
    yield
    _reset()


def _reset() -> None:
    shutdown_logging()
    root = logging.getLogger()
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial_handler_count = len(_our_handlers())

    configure_logging(cfg)
    assert len(_our_handlers()) == initial_handler_count, "Handlers were duplicated."

    configure_logging(cfg, force=True)
    assert len(_our_handlers()) == initial_handler_count


def test_log_rotation(tmp_path: Path) -> None:
    """TC-02: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Stopping the listener flushes the queue
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-03: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert len(_our_handlers()) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_file_messages_are_written(tmp_path: Path) -> None:
    log_file = tmp_path / "assetgen.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))

    logging.getLogger("assetgen.test").warning("Duplicate asset key detected")
    time.sleep(0.1)
    shutdown_logging()

    assert "Duplicate asset key detected" in log_file.read_text(encoding="utf-8")


def test_shutdown_removes_only_our_handlers() -> None:
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(level="INFO", console=True))
        shutdown_logging()

        assert _our_handlers() == []
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


@pytest.mark.parametrize(
    "level, expected",
    [
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("error", logging.ERROR),
        ("LOUD", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_level_names_resolve_to_numbers(level: str, expected: int) -> None:
    assert LoggingConfig(level=level).level_number == expected


def test_configured_level_is_applied_to_root() -> None:
    configure_logging(LoggingConfig(level="DEBUG", console=True))
    assert logging.getLogger().level == logging.DEBUG
