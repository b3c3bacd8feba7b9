"""Pytest configuration and shared fixtures for fprelude tests."""

import importlib

import pytest
import structlog
from structlog.testing import LogCapture


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from fprelude import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from fprelude import Nothing

    return Nothing


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from fprelude import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from fprelude import Failure

    return Failure(ValueError('test error'))


@pytest.fixture
def log_capture(monkeypatch):
    """Route the library's module loggers into a LogCapture."""
    # The package re-exports the `safe` function, which shadows the submodule attribute.
    safe_module = importlib.import_module('fprelude.decorators.safe')
    import fprelude.validation as validation_module

    capture = LogCapture()
    logger = structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[capture],
        wrapper_class=structlog.BoundLogger,
    )
    monkeypatch.setattr(safe_module, 'logger', logger)
    monkeypatch.setattr(validation_module, 'logger', logger)
    return capture


@pytest.fixture
def calls():
    """A list that side-effecting handlers append to."""
    return []
