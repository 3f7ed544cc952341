# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from ..core.logger import logger, getLogger
from .logger import setup_logging, LevelAwareFormatter, RICH_THEME

__all__ = ["logger", "getLogger", "setup_logging", "LevelAwareFormatter", "RICH_THEME"]
