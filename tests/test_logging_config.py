"""Tests for text_splitter.logging_config."""

import logging

import pytest

from text_splitter.logging_config import resolve_level, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("text_splitter")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestResolveLevel:
    def test_names_are_case_insensitive(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING

    def test_numbers_pass_through(self):
        assert resolve_level(logging.ERROR) == logging.ERROR

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_level("chatty")


class TestSetupLogging:
    def test_configures_package_logger(self, package_logger):
        logger = setup_logging("warning")

        assert logger is package_logger
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1

    def test_repeated_setup_replaces_handlers(self, package_logger, tmp_path):
        setup_logging(log_file=tmp_path / "first.log")
        setup_logging(log_file=tmp_path / "second.log")

        assert len(package_logger.handlers) == 2

    def test_child_loggers_reach_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "nested" / "splitter.log"
        setup_logging(logging.INFO, log_file=log_file)

        logging.getLogger("text_splitter.service").info("split finished")
        for handler in package_logger.handlers:
            handler.flush()

        assert "text_splitter.service - INFO - split finished" in log_file.read_text(encoding="utf-8")
