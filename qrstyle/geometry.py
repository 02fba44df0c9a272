# -*- coding: utf-8 -*-
"""
QR Layout Geometry

Converts the matrix size and layout options into the pixel frame every drawing
step shares: symbol origin, module size, and canvas center.
"""

import math
from dataclasses import dataclass

from .config import LayoutOptions


@dataclass(frozen=True)
class Geometry:
    """
    Pixel frame of one render.

    Attributes:
        count (int): Modules per side (N)
        width (int): Canvas width
        height (int): Canvas height
        drawable_size (float): Shorter canvas side minus both margins
        effective_size (float): Side of the drawn symbol (smaller when circular)
        module_size (float): Side of one module
        origin_x (float): Left edge of module column 0
        origin_y (float): Top edge of module row 0
    """
    count: int
    width: int
    height: int
    drawable_size: float
    effective_size: float
    module_size: float
    origin_x: float
    origin_y: float

    @property
    def center_x(self) -> float:
        return self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.height / 2.0

    def module_origin(self, row: int, col: int):
        """Top-left pixel corner of module (row, col)."""
        return self.origin_x + col * self.module_size, self.origin_y + row * self.module_size

    def module_center(self, row: int, col: int):
        half = self.module_size / 2.0
        x, y = self.module_origin(row, col)
        return x + half, y + half


def compute_geometry(count: int, layout: LayoutOptions) -> Geometry:
    """
    Compute the shared drawing frame.

    When circle_shape is set the symbol is shrunk by sqrt(2) so its corners
    stay inside the circular viewport.

    Args:
        count (int): Matrix size N (assumed >= 1)
        layout (LayoutOptions): Canvas size and margin

    Returns:
        Geometry: The frame, with the symbol centered on the canvas

    Example:
        >>> g = compute_geometry(21, LayoutOptions(width=200, height=200, margin=0))
        >>> round(g.module_size, 2)
        9.52
    """
    drawable = float(min(layout.width, layout.height) - 2 * layout.margin)
    effective = drawable / math.sqrt(2.0) if layout.circle_shape else drawable
    module_size = effective / count
    origin_x = (layout.width - count * module_size) / 2.0
    origin_y = (layout.height - count * module_size) / 2.0
    return Geometry(
        count=count,
        width=layout.width,
        height=layout.height,
        drawable_size=drawable,
        effective_size=effective,
        module_size=module_size,
        origin_x=origin_x,
        origin_y=origin_y,
    )
