# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Design file parsing and scene export."""

from .errors import (
    IOError,
    FileError,
    FileNotFoundError,
    DesignError,
    InvalidTomlError,
    ParamsValidationError,
    ExportError,
    ExportFailedError,
    OutputFileError,
)
from .design import Design, DesignParser
from .export import (
    DOCUMENT_HEADER,
    rasterize,
    rasterize_async,
    save_scene,
    serialize,
)

__all__ = [
    "IOError",
    "FileError",
    "FileNotFoundError",
    "DesignError",
    "InvalidTomlError",
    "ParamsValidationError",
    "ExportError",
    "ExportFailedError",
    "OutputFileError",
    "Design",
    "DesignParser",
    "DOCUMENT_HEADER",
    "rasterize",
    "rasterize_async",
    "save_scene",
    "serialize",
]
