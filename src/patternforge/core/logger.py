# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Logging utilities for PatternForge."""

import logging
from patternforge import __app_name__


def getLogger(name: str = __app_name__) -> logging.Logger:
    """Get a configured logger with the given name.

    Args:
        name: Logger name (defaults to "patternforge")

    Returns:
        Configured logging.Logger instance
    """
    logger = logging.getLogger(name)
    return logger


# Create the default logger instance
logger = getLogger()
