"""Environment file loading."""

import logging
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


def load_env_file(path: Optional[Union[str, Path]] = None, override: bool = False) -> bool:
    """Load variables from a .env file into the process environment.

    Args:
        path: Explicit .env path; searched upward from the working directory when omitted
        override: Replace variables that are already set

    Returns:
        True if a file was found and loaded
    """
    env_path = str(path) if path is not None else find_dotenv(usecwd=True)
    if not env_path or not Path(env_path).is_file():
        logger.debug("No .env file found")
        return False

    loaded = load_dotenv(env_path, override=override)
    logger.debug(f"Loaded environment from {env_path}")
    return loaded
