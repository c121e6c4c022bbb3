"""
Logging setup for applications using cachematrix.
"""

import logging
from typing import Optional, Union

from .config import CacheConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Logging level name or number. Defaults to CacheConfig.LOG_LEVEL

    Returns:
        The configured ``cachematrix`` logger
    """
    package_logger = logging.getLogger("cachematrix")
    if isinstance(level, str) or level is None:
        level = (level or CacheConfig.LOG_LEVEL).upper()
    package_logger.setLevel(level)

    if not any(getattr(h, "_cachematrix_handler", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._cachematrix_handler = True
        package_logger.addHandler(handler)

    return package_logger
