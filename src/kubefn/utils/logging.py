"""Structured logging setup for kubefn."""

import logging
import os
import sys
from typing import Optional, Union


def setup_logging(level: Optional[Union[int, str]] = None, format_string: Optional[str] = None) -> logging.Logger:
    """
    Set up structured logging for kubefn.
    
    Args:
        level: Logging level (default: KUBEFN_LOG_LEVEL or WARNING)
        format_string: Custom format string (optional)
    
    Returns:
        Configured logger instance
    """
    if level is None:
        level = os.environ.get("KUBEFN_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    logger = logging.getLogger("kubefn")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"kubefn.{name}")
