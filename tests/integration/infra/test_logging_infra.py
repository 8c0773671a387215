from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and file output.
"""

import logging
from pathlib import Path

import pytest

from linkup.infra.logging import LoggingConfig, configure_logging, get_default_log_path, shutdown_logging
from linkup.infra.logging.handlers import _is_our_handler


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    ours = [h for h in root.handlers if _is_our_handler(h)]

    configure_logging(cfg)
    assert [h for h in root.handlers if _is_our_handler(h)] == ours
    assert len(ours) == 1


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_defaults_to_info() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.INFO


def test_file_output(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "linkup.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("linkup.test").info("probe finished")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "probe finished" in content
    assert "linkup.test" in content


def test_default_log_path() -> None:
    path = get_default_log_path()
    assert path.endswith("linkup.log")
    assert "logs" in Path(path).parts
