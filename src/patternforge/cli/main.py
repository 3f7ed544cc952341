# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import sys

from cyclopts import App

from .render import render_pattern
from .info import show_palette, show_presets
from patternforge import __version__


app = App(version=__version__)
app.command(
    render_pattern,
    "render",
)
app.command(
    show_presets,
    "presets",
)
app.command(
    show_palette,
    "palette",
)


if __name__ == "__main__":
    sys.exit(app())
