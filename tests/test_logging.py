import logging
from pathlib import Path

import pytest

from assistant_agents.logging import configure_logging, get_logger


@pytest.fixture
def file_logger_name():
    name = "FileTest"
    yield name
    base = logging.getLogger(f"assistant_agents.{name}")
    for handler in list(base.handlers):
        if isinstance(handler, logging.FileHandler):
            base.removeHandler(handler)
            handler.close()


def test_get_logger_returns_same_instance():
    assert get_logger("Same") is get_logger("Same")


def test_success_is_written_to_log_dir(tmp_path: Path, file_logger_name: str):
    logger = get_logger(file_logger_name, log_dir=tmp_path)

    logger.success("assistant created")

    files = list(tmp_path.glob(f"{file_logger_name}_*.log"))
    assert len(files) == 1
    content = files[0].read_text(encoding="utf-8")
    assert "[SUCCESS]" in content
    assert "assistant created" in content


def test_configure_logging_updates_existing_loggers():
    logger = get_logger("Configured")

    configure_logging(level="DEBUG")
    try:
        assert logger.isEnabledFor(10)
    finally:
        configure_logging(level="INFO")
    assert not logger.isEnabledFor(10)
