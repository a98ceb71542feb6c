"""
Тесты настройки loguru
"""
import sys

import pytest
from loguru import logger

from utils.logger_config import configure_logging, get_logger


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_logs_go_to_files(tmp_path, restore_logger, capsys):
    log_dir = configure_logging(str(tmp_path / "logs"), "DEBUG")
    get_logger().debug("debug line")
    get_logger().error("error line")
    logger.complete()

    assert "debug line" in (log_dir / "app.log").read_text(encoding="utf-8")
    errors = (log_dir / "errors.log").read_text(encoding="utf-8")
    assert "error line" in errors
    assert "debug line" not in errors
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error line" not in captured.err
