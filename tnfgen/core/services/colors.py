"""
Random colors for generated style modules.

Hues advance by the golden-ratio conjugate from a random start, which
spreads successive colors around the wheel instead of clustering them.
"""

from __future__ import annotations

import colorsys
import random
from typing import Protocol

_GOLDEN_RATIO_CONJUGATE = 0.618033988749895


class ColorGenerator(Protocol):
    """Anything that can hand out a ``#rrggbb`` string."""

    def hex_string(self) -> str: ...


class RandomColor:
    """Seedable color source.

    Args:
        seed: Seed for the underlying ``random.Random``; None for OS entropy.
        saturation: HSV saturation in [0, 1].
        value: HSV value in [0, 1].
    """

    def __init__(
        self,
        seed: int | None = None,
        saturation: float = 0.5,
        value: float = 0.95,
    ) -> None:
        self._rng = random.Random(seed)
        self._hue = self._rng.random()
        self.saturation = saturation
        self.value = value

    def hex_string(self) -> str:
        self._hue = (self._hue + _GOLDEN_RATIO_CONJUGATE) % 1.0
        r, g, b = colorsys.hsv_to_rgb(self._hue, self.saturation, self.value)
        return "#{:02x}{:02x}{:02x}".format(
            round(r * 255), round(g * 255), round(b * 255)
        )
