"""Configuration for SDK logging."""

import logging
import os
from dataclasses import dataclass

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class LoggingConfig:
    """Configuration for the flagsdk logger."""

    log_level: str = "WARNING"
    structured_logging: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables.

        Environment variables:
            FLAGSDK_LOG_LEVEL: Level name for the flagsdk logger (default WARNING)
            FLAGSDK_STRUCTURED_LOGGING: Emit key=value log lines (true/false)
        """
        return cls(
            log_level=os.getenv("FLAGSDK_LOG_LEVEL", "WARNING"),
            structured_logging=os.getenv("FLAGSDK_STRUCTURED_LOGGING", "false").lower() == "true",
        )

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return self.log_level in VALID_LOG_LEVELS

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_level = self.log_level.upper()
        if not self.is_valid():
            raise ValueError(
                f"Invalid logging configuration. "
                f"Log level: {self.log_level}, "
                f"expected one of {', '.join(VALID_LOG_LEVELS)}"
            )
