# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Test fixtures for the PatternForge CLI tests."""

import os
import tempfile
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def keep_logging_config(mocker):
    """Commands configure the root logger; leave it to pytest during tests."""
    mocker.patch("patternforge.cli.render.set_logging_level")
    mocker.patch("patternforge.cli.info.set_logging_level")


@pytest.fixture
def temp_design_file():
    """Create a temporary design file for testing."""
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as tmp:
        content = """
        [global]
        pattern = "diagonal_contours"
        seed = 11

        [canvas]
        width = 320
        height = 240

        [brand]
        pair = "White / CBRE Green"

        [params]
        line_count = 4
        """
        tmp.write(content.encode())
        tmp.flush()
        path = Path(tmp.name)
    yield path
    os.unlink(path)
