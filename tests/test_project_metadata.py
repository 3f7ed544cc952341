# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import toml

from patternforge import __app_name__, __version__

ROOT = Path(__file__).resolve().parent.parent


def test_package_metadata_matches_pyproject() -> None:
    project = toml.load(ROOT / "pyproject.toml")["project"]
    assert project["name"] == __app_name__
    assert project["version"] == __version__
    assert project["scripts"]["patternforge"] == "patternforge.cli:app"


def test_readme_describes_the_package() -> None:
    project = toml.load(ROOT / "pyproject.toml")["project"]
    readme = ROOT / project["readme"]
    assert readme.name == "README.md"
    text = readme.read_text()
    assert text.startswith("# PatternForge")
    assert "patternforge render" in text
