"""Logging configuration for flagsdk."""

from .config import LoggingConfig
from .log_setup import setup_logging

__all__ = ["LoggingConfig", "setup_logging"]
