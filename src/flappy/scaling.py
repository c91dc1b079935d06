"""
scaling.py: Viewport-dependent scale factors shared by every subsystem.
"""

from dataclasses import dataclass

from .constants import (
    ORIGINAL_WIDTH, ORIGINAL_HEIGHT,
    HERO_BASE_WIDTH, HERO_BASE_HEIGHT, HERO_SIZE_FACTOR
)
from .data_models import Size


@dataclass
class ScalingContext:
    """
    Scale factors derived from the current viewport size.

    Owned by the game engine and handed to world generation, rendering and
    screens; recomputed in place on resize.
    """
    width: float = ORIGINAL_WIDTH
    height: float = ORIGINAL_HEIGHT

    @property
    def scale_x(self) -> float:
        return self.width / ORIGINAL_WIDTH

    @property
    def scale_y(self) -> float:
        return self.height / ORIGINAL_HEIGHT

    @property
    def bottom(self) -> float:
        """Floor of the play area; the hero is out of bounds below it."""
        return self.height

    @property
    def min_scale(self) -> float:
        return min(self.scale_x, self.scale_y)

    def update(self, width: float, height: float) -> "ScalingContext":
        self.width = width
        self.height = height
        return self

    def hero_size(self) -> Size:
        return Size(
            width=HERO_BASE_WIDTH * self.scale_x * HERO_SIZE_FACTOR,
            height=HERO_BASE_HEIGHT * self.scale_y * HERO_SIZE_FACTOR,
        )
