"""Test configuration and fixtures."""

import logging

import pytest

from flagsdk import FlagMetadata


@pytest.fixture
def sample_metadata() -> FlagMetadata:
    """Metadata with one entry of every kind."""
    return (
        FlagMetadata.builder()
        .add_string("string", "str")
        .add_integer("integer", 1)
        .add_float("float", 1.5)
        .add_double("double", 2.25)
        .add_boolean("boolean", True)
        .build()
    )


@pytest.fixture
def rule_metadata() -> FlagMetadata:
    """Metadata a provider would attach after a targeting rule matched."""
    return (
        FlagMetadata.builder()
        .add_boolean("active", True)
        .add_integer("ruleIndex", 3)
        .build()
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Unset flagsdk environment variables for the duration of a test.

    Setting each variable first makes monkeypatch restore the original state,
    including writes made directly to os.environ.
    """
    for var in ("FLAGSDK_LOG_LEVEL", "FLAGSDK_STRUCTURED_LOGGING"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch


@pytest.fixture
def flagsdk_logger():
    """The flagsdk logger, with handlers and level restored after the test."""
    logger = logging.getLogger("flagsdk")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
