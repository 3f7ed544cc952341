# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Parser for design files: a pattern, its parameters and render state in TOML."""

from pathlib import Path
from typing import Any, Dict, NamedTuple, Type, Union

import toml
from pydantic import BaseModel, ValidationError

from patternforge.core import (
    BrandPair,
    CanvasSpec,
    GlobalState,
    PatternType,
    logger,
)
from patternforge.patterns import BasePatternParams, EngineSettings, params_type_for

from .errors import FileNotFoundError, InvalidTomlError, ParamsValidationError


class Design(NamedTuple):
    """Everything needed to render one pattern."""

    state: GlobalState
    params: BasePatternParams
    settings: EngineSettings


def _format_errors(error: ValidationError) -> str:
    return "\n".join(
        f"  - {'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors()
    )


class DesignParser:
    """Parser for TOML design files.

    A design file may contain the tables `[global]` (pattern, seed,
    line_weight), `[canvas]`, `[brand]`, `[params]` and `[settings]`. Every
    table is optional; missing tables fall back to the model defaults.
    """

    KNOWN_SECTIONS = ("global", "canvas", "brand", "params", "settings")

    def __init__(self, file_path: Union[str, Path]):
        """Load and check a design file.

        Args:
            file_path: Path to the TOML design file

        Raises:
            FileNotFoundError: If the file doesn't exist
            InvalidTomlError: If the TOML is malformed
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise FileNotFoundError(str(self.file_path))

        try:
            with open(self.file_path, "r") as f:
                self.raw_data: Dict[str, Any] = toml.load(f)
        except toml.TomlDecodeError as e:
            raise InvalidTomlError(f"Invalid TOML format: {e}")

        self._validate_structure()

    def _validate_structure(self) -> None:
        """Warn about unknown top-level sections; they are ignored."""
        unknown_sections = [
            section for section in self.raw_data if section not in self.KNOWN_SECTIONS
        ]
        if unknown_sections:
            logger.warning(
                f"Unknown design sections found and ignored: {', '.join(unknown_sections)}"
            )

    def _section(self, name: str) -> Dict[str, Any]:
        data = self.raw_data.get(name, {})
        if not isinstance(data, dict):
            raise ParamsValidationError(
                f"Invalid format for section '{name}'. Expected a table, got {type(data).__name__}."
            )
        return dict(data)

    def _build(self, name: str, model: Type[BaseModel], data: Dict[str, Any]) -> Any:
        try:
            return model(**data)
        except ValidationError as e:
            raise ParamsValidationError(
                f"Invalid definition in section '{name}':\n{_format_errors(e)}"
            ) from e

    def _canvas(self) -> CanvasSpec:
        data = self._section("canvas")
        preset = data.get("dimension_preset")
        if preset and "width" not in data and "height" not in data:
            return CanvasSpec.from_preset(preset, padding=data.get("padding", 0.0))
        return self._build("canvas", CanvasSpec, data)

    def _brand(self) -> BrandPair:
        data = self._section("brand")
        pair = data.pop("pair", None)
        if pair is not None:
            base = BrandPair.from_preset(pair)
            data = {**base.model_dump(), **data}
        return self._build("brand", BrandPair, data)

    def parse(self) -> Design:
        """Validate every section into its model.

        The `[params]` table is validated against the parameter model of the
        pattern named in `[global]`.

        Returns:
            The parsed design.

        Raises:
            ParamsValidationError: If any section has invalid data.
            UnknownPaletteEntryError: If a named brand pair or canvas size
                does not exist.
        """
        global_data = self._section("global")
        global_data["canvas"] = self._canvas()
        global_data["brand"] = self._brand()
        state: GlobalState = self._build("global", GlobalState, global_data)

        params_model = params_type_for(PatternType(state.pattern))
        params = self._build("params", params_model, self._section("params"))
        settings = self._build("settings", EngineSettings, self._section("settings"))

        logger.debug(f"Parsed design {self.file_path} ({state.pattern.value})")
        return Design(state=state, params=params, settings=settings)
