# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .svg_renderer import SVGRenderer

__all__ = ["SVGRenderer"]
