# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Standalone SVG documents and PNG rasters of generated scenes."""

from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Union

from drawsvg import Drawing

from patternforge.core import PatternForgeError, logger
from patternforge.renderers import SVGRenderer
from patternforge.scene import Scene

from .errors import ExportFailedError, OutputFileError

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
SVG_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)
DOCUMENT_HEADER = XML_DECLARATION + SVG_DOCTYPE

MAX_SCALE = 16.0

_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="patternforge-raster")


def _render(scene: Scene) -> Drawing:
    try:
        return SVGRenderer(scene).render()
    except PatternForgeError as e:
        raise ExportFailedError("Scene could not be rendered.", e.message) from e
    except (TypeError, ValueError) as e:
        raise ExportFailedError("Scene could not be rendered.", str(e)) from e


def serialize(scene: Scene) -> str:
    """Serialize a scene to a standalone SVG document.

    The document starts with an XML declaration and the SVG 1.1 DOCTYPE, has
    explicit `width`, `height` and `viewBox`, and carries every color as an
    explicit attribute so it renders identically outside any page context.

    Raises:
        ExportFailedError: If the scene cannot be rendered.
    """
    drawing = _render(scene)
    try:
        return drawing.as_svg(header=DOCUMENT_HEADER)
    except (TypeError, ValueError) as e:
        raise ExportFailedError("Scene could not be serialized.", str(e)) from e


def rasterize(scene: Scene, scale: float = 1.0) -> bytes:
    """Rasterize a scene to PNG bytes at `scale` times its pixel size.

    The vector document is re-rendered at the target size (only the output
    width and height change, the viewBox stays), so detail is never
    upsampled from a fixed-resolution bitmap.

    Raises:
        ExportFailedError: For a non-positive scale or any rasterizer failure,
            including a missing Cairo installation.
    """
    if not 0 < scale <= MAX_SCALE:
        raise ExportFailedError(f"Scale must be within (0, {MAX_SCALE}], got {scale}.")

    drawing = _render(scene)
    drawing.set_pixel_scale(scale)
    try:
        png_data = drawing.rasterize().png_data
    except Exception as e:
        raise ExportFailedError("Rasterization failed.", f"{type(e).__name__}: {e}") from e

    if not png_data:
        raise ExportFailedError("Rasterization produced no image data.")
    logger.debug(f"Rasterized scene at {scale}x ({len(png_data)} bytes)")
    return png_data


def rasterize_async(scene: Scene, scale: float = 1.0) -> "Future[bytes]":
    """Rasterize on a single background worker.

    Requests are queued behind each other. A failure is reported as an
    `ExportFailedError` set on the returned future.
    """
    return _executor.submit(rasterize, scene, scale)


def save_scene(scene: Scene, output_path: Union[str, Path], scale: float = 1.0) -> Path:
    """Write a scene to `.svg` or `.png`, creating parent directories as needed.

    Args:
        scene: The scene to export.
        output_path: Destination; the suffix selects the format.
        scale: Raster scale factor, ignored for SVG output.

    Returns:
        The path written.

    Raises:
        OutputFileError: For an unsupported suffix or an unwritable path.
        ExportFailedError: If rendering or rasterization fails.
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    if suffix not in (".svg", ".png"):
        raise OutputFileError(str(output_path), "expected a .svg or .png file")

    if suffix == ".svg":
        content: Union[str, bytes] = serialize(scene)
    else:
        content = rasterize(scene, scale)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            output_path.write_text(content, encoding="utf-8")
        else:
            output_path.write_bytes(content)
    except OSError as e:
        raise OutputFileError(str(output_path), str(e)) from e

    logger.info(f"[bold]Saved {suffix[1:].upper()} to {output_path}[/bold]")
    return output_path
