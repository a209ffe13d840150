"""
Tests for the loguru file sink
"""
from loguru import logger

from blue_sky_alerts.utils.logger import setup_logging


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"

    handler_id = setup_logging(str(log_file), level="INFO")
    try:
        logger.debug("hidden detail")
        logger.warning("Error fetching weather for Leeds: HTTP 500")
    finally:
        logger.remove(handler_id)

    content = log_file.read_text(encoding="utf-8")
    assert "WARNING | test_logger:test_setup_logging_writes_file" in content
    assert "Error fetching weather for Leeds" in content
    assert "hidden detail" not in content
