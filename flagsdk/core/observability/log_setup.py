"""Logger setup for the flagsdk package."""

import logging
from typing import Optional

from .config import LoggingConfig

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
STRUCTURED_FORMAT = "ts=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)r"

_HANDLER_NAME = "flagsdk"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Attach a stream handler to the flagsdk logger.

    Calling this more than once replaces the handler instead of stacking them.

    Args:
        config: Logging configuration, read from the environment when omitted

    Returns:
        The configured flagsdk logger
    """
    config = config or LoggingConfig.from_env()

    logger = logging.getLogger("flagsdk")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(STRUCTURED_FORMAT if config.structured_logging else PLAIN_FORMAT)
    )
    logger.addHandler(handler)
    logger.setLevel(config.level)

    logger.debug(f"Logging configured at {config.log_level}")
    return logger
