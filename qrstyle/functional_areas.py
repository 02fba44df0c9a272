# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module identifies the finder patterns of a QR symbol and decides which
dark modules the module-drawing step may emit. Two areas are carved out:

1. The three 7x7 finder patterns, when a custom locator shape redraws them
2. A disc around the canvas center, when a logo hole radius is configured

Every module-drawing algorithm consults the same drawable mask, so batched,
ring, and per-module output can never disagree about a module.

Functions:
    finder_origins: Top-left (row, col) of the three finder patterns
    is_finder_pattern: Whether a module lies inside a finder pattern
    should_draw_module: Exclusion predicate for a single module
    build_drawable_mask: Vectorized predicate over the whole matrix

Note:
    Alignment patterns are never excluded. Their positions depend on the
    version, and no drawing step treats them specially.
"""

import math
from typing import List, Tuple

import numpy as np

from .config import StyleConfig
from .geometry import Geometry
from .matrix import ModuleMatrix

FINDER_SIZE = 7


def finder_origins(size: int) -> List[Tuple[int, int]]:
    """
    Top-left (row, col) of the finder patterns: top-left, top-right, bottom-left.

    Example:
        >>> finder_origins(21)
        [(0, 0), (0, 14), (14, 0)]
    """
    return [(0, 0), (0, size - FINDER_SIZE), (size - FINDER_SIZE, 0)]


def is_finder_pattern(row: int, col: int, size: int) -> bool:
    for (r0, c0) in finder_origins(size):
        if r0 <= row < r0 + FINDER_SIZE and c0 <= col < c0 + FINDER_SIZE:
            return True
    return False


def should_draw_module(row: int, col: int, config: StyleConfig, geometry: Geometry) -> bool:
    """
    Decide whether the dark module at (row, col) is drawn by the module pass.

    Args:
        row (int): Module row
        col (int): Module column
        config (StyleConfig): Style in effect
        geometry (Geometry): Pixel frame of the render

    Returns:
        bool: False when a custom locator covers the module, or when the
            module center lies strictly inside the logo hole
    """
    if config.locators.shape is not None and is_finder_pattern(row, col, geometry.count):
        return False

    hole = config.logo.hole_radius_px
    if hole is not None:
        x, y = geometry.module_center(row, col)
        distance = math.hypot(x - geometry.center_x, y - geometry.center_y)
        if distance < hole:
            return False

    return True


def build_drawable_mask(matrix: ModuleMatrix, config: StyleConfig, geometry: Geometry) -> np.ndarray:
    """
    Boolean array marking the dark modules that the module pass must emit.

    Equivalent to matrix[r, c] and should_draw_module(r, c, ...) for every
    cell, computed once per render.
    """
    size = matrix.size
    mask = matrix.array.copy()

    if config.locators.shape is not None:
        for (r0, c0) in finder_origins(size):
            mask[max(r0, 0):r0 + FINDER_SIZE, max(c0, 0):c0 + FINDER_SIZE] = False

    hole = config.logo.hole_radius_px
    if hole is not None:
        idx = np.arange(size, dtype=float)
        half = geometry.module_size / 2.0
        xs = geometry.origin_x + idx * geometry.module_size + half
        ys = geometry.origin_y + idx * geometry.module_size + half
        dist = np.hypot(xs[np.newaxis, :] - geometry.center_x, ys[:, np.newaxis] - geometry.center_y)
        mask &= ~(dist < hole)

    mask.setflags(write=False)
    return mask
