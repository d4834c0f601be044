"""
Logging utilities for ptime.

Results are written to stdout, so log records always go to stderr.

Example:
    >>> from ptime.utils import setup_logging
    >>> setup_logging("DEBUG")
"""

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: Union[str, int] = logging.WARNING,
    format_string: Optional[str] = None,
) -> None:
    """Set up logging configuration for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # exifread warns about every file without an EXIF block
    logging.getLogger("exifread").setLevel(logging.ERROR)
