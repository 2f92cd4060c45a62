"""Tests for logging configuration."""

import logging

import pytest

from flagsdk import LoggingConfig, setup_logging


def test_defaults_from_env(clean_env):
    config = LoggingConfig.from_env()

    assert config.log_level == "WARNING"
    assert config.level == logging.WARNING
    assert config.structured_logging is False


def test_values_from_env(clean_env):
    clean_env.setenv("FLAGSDK_LOG_LEVEL", "debug")
    clean_env.setenv("FLAGSDK_STRUCTURED_LOGGING", "TRUE")

    config = LoggingConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.structured_logging is True


def test_level_normalized_on_construction():
    assert LoggingConfig(log_level="info").log_level == "INFO"


def test_invalid_level_rejected():
    with pytest.raises(ValueError, match="Invalid logging configuration"):
        LoggingConfig(log_level="LOUD")


def test_setup_logging_does_not_stack_handlers(flagsdk_logger):
    setup_logging(LoggingConfig(log_level="INFO"))
    setup_logging(LoggingConfig(log_level="ERROR", structured_logging=True))

    named = [h for h in flagsdk_logger.handlers if h.get_name() == "flagsdk"]
    assert len(named) == 1
    assert flagsdk_logger.level == logging.ERROR
    assert "level=" in named[0].formatter._fmt


def test_setup_logging_reads_env(clean_env, flagsdk_logger):
    clean_env.setenv("FLAGSDK_LOG_LEVEL", "INFO")

    logger = setup_logging()

    assert logger is flagsdk_logger
    assert logger.level == logging.INFO
