"""Popup sizing and placement."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Fraction of the container height that the popup expands to, at maximum.
MAX_HEIGHT_FRACTION = 0.9


@dataclass(frozen=True, slots=True)
class PopupGeometry:
    top: int
    left: int
    max_height: int


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_geometry(
    container_width: int,
    container_height: int,
    popup_width: int,
    max_height_fraction: float = MAX_HEIGHT_FRACTION,
) -> PopupGeometry:
    """Return the height cap and position of the popup.

    The popup is anchored so that it is centered when at its maximum height,
    which lets it grow without being repositioned or going offscreen.
    """
    max_height = round_half_up(container_height * max_height_fraction)
    top = round_half_up((container_height - max_height) / 2)
    left = round_half_up((container_width - popup_width) / 2)
    return PopupGeometry(top=top, left=left, max_height=max_height)


__all__ = ["MAX_HEIGHT_FRACTION", "PopupGeometry", "compute_geometry", "round_half_up"]
