# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Mesh gradients approximated by blurred grids of opaque rectangles."""

from drawsvg import ClipPath, Filter, FilterItem, Group, Mask, Rectangle

from patternforge.core import round_half_up, to_hex
from patternforge.mesh import MeshSample
from patternforge.scene import MeshGradientElement

# Weak overlay noise breaks up banding in smooth gradients.
NOISE_FREQUENCY = 0.8
NOISE_OCTAVES = 3
NOISE_STRENGTH = 0.04


def _blur_filter(id: str, sample: MeshSample) -> Filter:
    blur = Filter(id=id, x="-50%", y="-50%", width="200%", height="200%")
    blur.append(
        FilterItem(
            "feGaussianBlur",
            in_="SourceGraphic",
            stdDeviation=sample.blur_std,
            result="blurred",
        )
    )
    if sample.profile.noise_dither:
        blur.append(
            FilterItem(
                "feTurbulence",
                type="fractalNoise",
                baseFrequency=NOISE_FREQUENCY,
                numOctaves=NOISE_OCTAVES,
                stitchTiles="stitch",
                result="noise",
            )
        )
        blur.append(
            FilterItem(
                "feColorMatrix",
                type="matrix",
                values=f"1 0 0 0 0  0 1 0 0 0  0 0 1 0 0  0 0 0 {NOISE_STRENGTH} 0",
                in_="noise",
                result="weakNoise",
            )
        )
        blur.append(
            FilterItem(
                "feComposite",
                operator="in",
                in_="weakNoise",
                in2="blurred",
                result="noiseOverlay",
            )
        )
        blur.append(FilterItem("feBlend", mode="overlay", in_="noiseOverlay", in2="blurred"))
    return blur


def _draw_mesh(element: MeshGradientElement) -> Group:
    """Draws a mesh gradient as blurred color cells, clipped to its area.

    Profiles with an alpha mask get a parallel grid of grey cells (white is
    opaque) that is blurred the same way and used as a mask.
    """
    sample = element.sample
    prefix = element.id
    blur = _blur_filter(f"{prefix}-blur", sample)

    color_cells = Group(filter=blur)
    alpha_cells = Group(filter=blur)
    for row, col, rgb, alpha in sample.cells():
        x, y, width, height = sample.cell_rect(row, col)
        color_cells.append(Rectangle(x, y, width, height, fill=to_hex(*rgb)))
        if sample.profile.alpha_mask:
            grey = round_half_up(alpha * 255)
            alpha_cells.append(
                Rectangle(x, y, width, height, fill=to_hex(grey, grey, grey))
            )

    content = color_cells
    if sample.profile.alpha_mask:
        mask = Mask(id=f"{prefix}-alpha-mask")
        mask.append(alpha_cells)
        content = Group(mask=mask)
        content.append(color_cells)

    clip = ClipPath(id=f"{prefix}-clip")
    clip.append(Rectangle(0, 0, sample.width, sample.height))

    mesh = Group(id=element.id, clip_path=clip)
    if element.style.opacity != 1:
        mesh.args["opacity"] = element.style.opacity
    mesh.append(content)
    return mesh
