"""
Tests for logging setup.
"""

import logging

from legend_sections.logging_config import setup_logging


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "legend.log"
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = logging.getLogger("legend_sections")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG
    logging.getLogger("legend_sections.partition").debug("packed")
    for handler in logger.handlers:
        handler.flush()
    assert "packed" in log_file.read_text()
    setup_logging(level=logging.INFO)
    assert len(logger.handlers) == 1
