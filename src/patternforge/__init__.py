# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""PatternForge: deterministic generators for brand-consistent vector patterns."""

__app_name__ = "patternforge"
__version__ = "0.1.0"
