"""
Logging setup shared by the command line entry points.
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(default_level: str = "WARNING") -> None:
    """Configure logging based on environment variables"""
    log_level = os.environ.get("LOG_LEVEL", default_level).upper()
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {log_level}, defaulting to {default_level}")
        log_level = default_level.upper()
        numeric_level = getattr(logging, log_level)

    log_format = os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT)
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        force=True,
    )
    logger.debug(
        "Logging configured",
        extra={"log_level": log_level, "numeric_level": numeric_level},
    )
