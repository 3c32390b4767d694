from __future__ import annotations

from typing import Tuple

from hullviz.constants import LOGICAL_HEIGHT, LOGICAL_WIDTH


class CanvasMapper:
    """Maps the fixed logical plane onto the window, letterboxed and centred.

    Physical coordinates use a top-left origin with Y growing downward, while
    logical Y grows upward. The window is read on every call, so resizes are
    picked up without notification.
    """

    def __init__(self, window, logical_width: float = LOGICAL_WIDTH, logical_height: float = LOGICAL_HEIGHT,
                 *, reserved_bottom: float = 0.0):
        self.window = window
        self.logical_width = logical_width
        self.logical_height = logical_height
        # Strip at the bottom of the window the drawing area must not cover (status bar).
        self.reserved_bottom = reserved_bottom

    def physical_size(self) -> Tuple[float, float]:
        return (float(self.window.width), max(float(self.window.height) - self.reserved_bottom, 1.0))

    def drawing_area_size(self) -> Tuple[float, float]:
        logical_ratio = self.logical_width / self.logical_height
        physical_width, physical_height = self.physical_size()
        physical_ratio = physical_width / physical_height
        if logical_ratio < physical_ratio:
            # Window is wider than the logical plane: height limits.
            return (logical_ratio * physical_height, physical_height)
        return (physical_width, physical_width / logical_ratio)

    def to_physical(self, logical_x: float, logical_y: float) -> Tuple[float, float]:
        physical_width, physical_height = self.physical_size()
        area_width, area_height = self.drawing_area_size()
        physical_x = (logical_x / self.logical_width) * area_width + (physical_width - area_width) / 2
        physical_y = (logical_y / self.logical_height) * area_height + (physical_height - area_height) / 2
        return (physical_x, physical_height - physical_y)
