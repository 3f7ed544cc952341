# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from patternforge.core import GlobalState, logger
from patternforge.scene import Scene

from .base import BasePatternParams, create_scene


class PortalParams(BasePatternParams):
    """Reserved pattern; it has no parameters yet."""


def generate_portal(params: PortalParams, state: GlobalState) -> Scene:
    """Reserved pattern: an empty scene with only the brand background."""
    scene, _ = create_scene(state, "portal")
    logger.info("The portal pattern is not implemented; rendering background only.")
    return scene
