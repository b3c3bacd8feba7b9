"""Tests for configuration and logging setup."""

import logging

import pytest
import structlog

import fprelude._config as config_module
from fprelude import PreludeConfig, configure_logging, get_config, get_logger, init


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Reset global config and environment before each test."""
    monkeypatch.setattr(config_module, '_config', None)
    monkeypatch.delenv('FPRELUDE_LOG_LEVEL', raising=False)
    monkeypatch.delenv('FPRELUDE_LOG_FORMAT', raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


class TestInit:
    """Tests for init and get_config."""

    def test_get_config_before_init_raises(self):
        """get_config refuses to run before init."""
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_defaults(self):
        """With no arguments or environment, logging stays silent."""
        config = init()
        assert config == PreludeConfig(log_level=None, json_logs=True)
        assert get_config() is config

    def test_init_explicit(self):
        """Explicit arguments win."""
        config = init(log_level='DEBUG', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        assert logging.getLogger().level == logging.DEBUG

    def test_init_from_environment(self, monkeypatch):
        """Environment variables fill unset arguments."""
        monkeypatch.setenv('FPRELUDE_LOG_LEVEL', 'warning')
        monkeypatch.setenv('FPRELUDE_LOG_FORMAT', 'console')
        config = init()
        assert config.log_level == 'warning'
        assert config.json_logs is False
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_format_warns(self, monkeypatch, caplog):
        """An unknown format falls back to json with a warning."""
        monkeypatch.setenv('FPRELUDE_LOG_FORMAT', 'xml')
        with caplog.at_level(logging.WARNING):
            config = init()
        assert config.json_logs is True
        assert 'xml' in caplog.text

    def test_config_is_frozen(self):
        """PreludeConfig cannot be modified."""
        config = init()
        with pytest.raises(AttributeError):
            config.log_level = 'INFO'


class TestLogging:
    """Tests for configure_logging and get_logger."""

    def test_configure_logging_installs_one_handler(self):
        """The root logger gets a single structured handler."""
        configure_logging('INFO')
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.INFO

    def test_json_output(self, capsys):
        """JSON output carries the event and extra fields."""
        configure_logging('DEBUG', json_output=True)
        get_logger('fprelude.test').info('hello', answer=42)
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"answer": 42' in err

    def test_get_logger_returns_bindable_logger(self):
        """get_logger returns a structlog logger."""
        logger = get_logger('fprelude.test')
        assert hasattr(logger, 'bind')
