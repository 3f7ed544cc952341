# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for PatternForge.

Generates brand patterns and exports them as standalone SVG documents or
PNG rasters.
"""

from patternforge.cli.main import app

__all__ = ["app"]
