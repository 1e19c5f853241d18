"""Tests for logging setup."""

import logging

from contentfully.logger import LOGGER_NAME, configure_logging


class TestConfigureLogging:

    def test_level_from_argument(self):
        logger = configure_logging('debug')
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv('CONTENTFULLY_LOG_LEVEL', 'error')
        assert configure_logging().level == logging.ERROR

    def test_handler_added_once(self):
        configure_logging('info')
        logger = configure_logging('info')
        ours = [h for h in logger.handlers if getattr(h, '_contentfully', False)]
        assert len(ours) == 1
