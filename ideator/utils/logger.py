"""
Logging setup for Ideator.

All log output goes to stderr so stdout carries only command output (reports, JSON).
"""

import logging
import sys
from ideator.utils.config import config

# Third-party loggers stay quiet unless something goes wrong
logging.basicConfig(level=logging.ERROR, format=config.log_format, stream=sys.stderr)
for noisy in ("httpx", "httpcore", "google_genai"):
    logging.getLogger(noisy).setLevel(logging.WARNING)


def setup_logger(name: str = "ideator", stream=None) -> logging.Logger:
    """
    Give a package logger a single stream handler at the configured level.

    Args:
        name: Logger to configure
        stream: Destination stream, stderr when omitted

    Returns:
        The configured logger
    """
    package_logger = logging.getLogger(name)
    package_logger.setLevel(config.log_level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(config.log_format))
    package_logger.addHandler(handler)

    # Avoid duplicates through the root handler
    package_logger.propagate = False
    return package_logger


setup_logger()

logger = logging.getLogger(__name__)
