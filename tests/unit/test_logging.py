"""Tests for logging module."""
import asyncio
import logging

import pytest

import b2py
from b2py import APIConfig, AsyncAPIClient
from b2py.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_with_name(self):
        logger = get_logger('b2py.api')

        assert logger.name == 'b2py.api'

    def test_propagates(self):
        logger = get_logger('b2py.test')

        assert logger.propagate is True

    def test_returns_logger_instance(self):
        assert isinstance(get_logger('b2py.test'), logging.Logger)

    def test_default_level_without_root_handlers(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, 'handlers', [])

        logger = get_logger('b2py.unconfigured')

        assert logger.level == logging.WARNING


class TestSetupLogging:
    """Test suite for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_levels(self):
        names = ['b2py', 'b2py.api', 'b2py.auth']
        levels = {name: logging.getLogger(name).level for name in names}
        yield
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)

    def test_sets_level(self):
        b2py.setup_logging(logging.DEBUG)

        assert logging.getLogger('b2py').level == logging.DEBUG
        assert logging.getLogger('b2py.api').level == logging.DEBUG
        assert logging.getLogger('b2py.auth').level == logging.DEBUG

    def test_only_touches_package_loggers(self):
        b2py.setup_logging(logging.DEBUG)

        assert 'b2py.cli' not in logging.Logger.manager.loggerDict

    def test_transport_logs_at_debug(self, caplog, client):
        b2py.setup_logging(logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger='b2py'):
            asyncio.run(client.authorize())

        messages = [r.getMessage() for r in caplog.records if r.name.startswith('b2py')]
        assert any('b2_authorize_account' in m for m in messages)
        assert not any('secret' in m or 'token_abc' in m for m in messages)


class TestAPILogLevel:
    """The transport applies APIConfig.log_level when logging is unconfigured."""

    @pytest.fixture(autouse=True)
    def restore_level(self):
        logger = logging.getLogger('b2py.api')
        level = logger.level
        yield
        logger.setLevel(level)

    def test_applied_without_root_handlers(self, monkeypatch):
        monkeypatch.setattr(logging.getLogger(), 'handlers', [])

        AsyncAPIClient(APIConfig(log_level=logging.DEBUG))

        assert logging.getLogger('b2py.api').level == logging.DEBUG

    def test_ignored_when_root_configured(self, monkeypatch):
        monkeypatch.setattr(logging.getLogger(), 'handlers', [logging.NullHandler()])
        logging.getLogger('b2py.api').setLevel(logging.NOTSET)

        AsyncAPIClient(APIConfig(log_level=logging.DEBUG))

        assert logging.getLogger('b2py.api').level == logging.NOTSET
