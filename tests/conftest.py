"""Pytest configuration and shared fixtures for klaw-outcome tests."""

import logging

import pytest

from klaw_outcome import _config


@pytest.fixture(autouse=True)
def fresh_config():
    """Start every test from the environment-derived configuration."""
    _config.reset()
    yield
    _config.reset()


@pytest.fixture
def restore_logging():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from klaw_outcome import success

    return success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from klaw_outcome import failure

    return failure(ValueError("test error"))


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from klaw_outcome import present

    return present("hello")


@pytest.fixture
def sample_absent():
    """Sample Absent value for testing."""
    from klaw_outcome import absent

    return absent()
