# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Error classes for the PatternForge IO module."""

from typing import Optional

from patternforge.core import PatternForgeError


class IOError(PatternForgeError):
    """Base class for all IO-related errors in PatternForge."""

    def __init__(self, message: str):
        super().__init__(f"IO error: {message}")


class FileError(IOError):
    """Base class for file-related errors."""

    pass


class FileNotFoundError(FileError):
    """Exception raised when a required file is not found."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        message = f"File not found: {file_path}"
        suggestion = "Please check that the file exists and the path is correct."
        super().__init__(f"{message}\n{suggestion}")


class DesignError(IOError):
    """Base class for design file errors."""

    def __init__(self, message: str):
        super().__init__(f"Design error: {message}")


class InvalidTomlError(DesignError):
    """Error for malformed TOML files."""

    pass


class ParamsValidationError(DesignError):
    """Error for design values rejected by the parameter models."""

    pass


class ExportError(IOError):
    """Base class for export errors."""

    def __init__(self, message: str):
        super().__init__(f"Export error: {message}")


class ExportFailedError(ExportError):
    """Raised when a scene cannot be serialized or rasterized."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.details = details
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


class OutputFileError(ExportError):
    """Raised when the output path cannot be written or has an unsupported suffix."""

    def __init__(self, file_path: str, details: str):
        self.file_path = file_path
        super().__init__(f"Cannot write {file_path}: {details}")
