# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import Optional

from patternforge.mesh import MeshSample

from .base_element import BaseSceneElement, BaseSceneStyle


class MeshGradientElement(BaseSceneElement[BaseSceneStyle]):
    """A sampled mesh gradient covering (0, 0, width, height) in local coordinates.

    The renderer draws every grid cell as an opaque rectangle, blurs the
    result with `sample.blur_std` and clips it to the visible area. Profiles
    with an alpha mask additionally modulate opacity with the alpha grid.
    """

    def __init__(
        self,
        id: str,
        sample: MeshSample,
        style: Optional[BaseSceneStyle] = None,
    ):
        super().__init__(id=id, style=style)
        self.sample = sample

    @property
    def default_style(self) -> BaseSceneStyle:
        return BaseSceneStyle()

    @property
    def width(self) -> float:
        return self.sample.width

    @property
    def height(self) -> float:
        return self.sample.height
