"""
Unit tests for TextcalLogger.
"""

import logging

import pytest

from textcal.logging import TextcalLogger, get_logger


@pytest.mark.unit
class TestTextcalLogger:
    """Test correlation ids and context handling."""

    def test_name_and_correlation_id(self):
        logger = TextcalLogger("textcal.test", correlation_id="fixed")
        assert logger.name == "textcal.test"
        assert logger.correlation_id == "fixed"

    def test_generated_correlation_id(self):
        assert TextcalLogger("a").correlation_id != TextcalLogger("a").correlation_id

    def test_records_carry_correlation_id_and_context(self, caplog):
        logger = TextcalLogger("textcal.test", correlation_id="cid-1")
        logger.add_context(command="seq")

        with caplog.at_level(logging.INFO, logger="textcal.test"):
            logger.info("Built sequence", count=3)

        record = caplog.records[-1]
        assert record.getMessage() == "Built sequence"
        assert record.correlation_id == "cid-1"
        assert record.extra_context == {"command": "seq", "count": 3}

    def test_disabled_level_is_skipped(self, caplog):
        logger = TextcalLogger("textcal.quiet")
        with caplog.at_level(logging.WARNING, logger="textcal.quiet"):
            logger.debug("hidden")
        assert not [r for r in caplog.records if r.name == "textcal.quiet"]

    def test_exception_includes_traceback(self, caplog):
        logger = TextcalLogger("textcal.test")
        with caplog.at_level(logging.ERROR, logger="textcal.test"):
            try:
                raise ValueError("boom")
            except ValueError:
                logger.exception("Failed")
        assert caplog.records[-1].exc_info is not None

    def test_with_context_copies(self):
        logger = TextcalLogger("textcal.test")
        logger.add_context(a=1)
        child = logger.with_context(b=2)
        assert child.extra_context == {"a": 1, "b": 2}
        assert logger.extra_context == {"a": 1}
        assert child.correlation_id == logger.correlation_id

    def test_temp_context_restores(self):
        logger = TextcalLogger("textcal.test")
        logger.add_context(a=1)
        with logger.temp_context(b=2):
            assert logger.extra_context == {"a": 1, "b": 2}
        assert logger.extra_context == {"a": 1}

    def test_clear_context(self):
        logger = TextcalLogger("textcal.test")
        logger.add_context(a=1)
        logger.clear_context()
        assert logger.extra_context == {}

    def test_get_logger(self):
        logger = get_logger("textcal.factory", "cid")
        assert isinstance(logger, TextcalLogger)
        assert logger.correlation_id == "cid"
