# -*- coding: utf-8 -*-
"""
Module Drawing Module

Emits the dark modules of the symbol. Three algorithms, chosen by DotType:

    Batched squares (SQUARE without rounding): maximal horizontal runs per
        row, all merged into a single <path>. Output grows with the number of
        runs rather than the number of modules.
    Classy rings (CLASSY): one hollow stroked circle per module.
    Individual shapes (everything else): one element per module, each with
        its own fill so gradient masking can color modules independently.

All three read the same drawable mask (see functional_areas), so exclusions
are identical whatever the style.

Functions:
    module_fill: Shared fill (flat color or gradient reference)
    row_runs: Maximal runs of True values in one row
    batched_square_path: Path data covering every drawable module
    draw_modules: Complete module group for a render
"""

from typing import List, Tuple

import numpy as np

from .colors import apply_gradient_masking
from .config import DotType, StyleConfig, clamp
from .defs import GRADIENT_ID, SHADOW_ID
from .formatting import escape_attr, fmt
from .geometry import Geometry

CLASSY_STROKE_RATIO = 0.2
ROUNDED_DEFAULT_RATIO = 0.2
EXTRA_ROUNDED_RATIO = 0.45
CLASSY_ROUNDED_OUTER_RATIO = 0.45
CLASSY_ROUNDED_INNER_RATIO = 0.6
CLASSY_ROUNDED_DOT_RATIO = 0.7


def module_fill(config: StyleConfig) -> str:
    if config.gradient.type is not None:
        return f'url(#{GRADIENT_ID})'
    return config.colors.foreground


def uses_batched_squares(config: StyleConfig) -> bool:
    return config.modules.type is DotType.SQUARE and not config.modules.rounded


def row_runs(row: np.ndarray) -> List[Tuple[int, int]]:
    """
    Maximal runs of consecutive True values.

    Returns:
        List[Tuple[int, int]]: (start_col, length) pairs, left to right

    Example:
        >>> row_runs(np.array([True, True, False, True]))
        [(0, 2), (3, 1)]
    """
    padded = np.concatenate(([0], row.astype(np.int8), [0]))
    edges = np.diff(padded)
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)
    return [(int(s), int(e - s)) for s, e in zip(starts, ends)]


def _rect_path(x: float, y: float, w: float, h: float) -> str:
    return f"M{fmt(x)},{fmt(y)}h{fmt(w)}v{fmt(h)}h-{fmt(w)}z"


def batched_square_path(drawable: np.ndarray, geometry: Geometry) -> str:
    """Path data with one closed rectangle per horizontal run of modules."""
    dot = geometry.module_size
    parts = []
    for r in range(drawable.shape[0]):
        y = geometry.origin_y + r * dot
        for start, length in row_runs(drawable[r]):
            parts.append(_rect_path(geometry.origin_x + start * dot, y, length * dot, dot))
    return ''.join(parts)


def _classy_rings(drawable: np.ndarray, geometry: Geometry, fill: str) -> List[str]:
    dot = geometry.module_size
    stroke_w = dot * CLASSY_STROKE_RATIO
    # Ring centered on the stroke, so the outer edge touches the module bounds
    radius = dot / 2.0 - stroke_w / 2.0
    out = []
    for row, col in zip(*np.nonzero(drawable)):
        cx, cy = geometry.module_center(int(row), int(col))
        out.append(f'<circle cx="{fmt(cx)}" cy="{fmt(cy)}" r="{fmt(radius)}" '
                   f'fill="none" stroke="{fill}" stroke-width="{fmt(stroke_w)}"/>')
    return out


def _rounded_rect(x: float, y: float, size: float, rx: float, color: str) -> str:
    return (f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(size)}" height="{fmt(size)}" '
            f'rx="{fmt(rx)}" ry="{fmt(rx)}" fill="{color}"/>')


def _individual_modules(drawable: np.ndarray, geometry: Geometry, config: StyleConfig, fill: str) -> List[str]:
    dot = geometry.module_size
    options = config.modules
    dot_type = options.type
    radius = dot * clamp(options.radius_factor, 0.0, 0.5)
    masking = config.advanced.gradient_masking
    out = []

    for row, col in zip(*np.nonzero(drawable)):
        x, y = geometry.module_origin(int(row), int(col))
        cx, cy = x + dot / 2.0, y + dot / 2.0
        color = escape_attr(apply_gradient_masking(
            masking, fill, cx, cy, geometry.center_x, geometry.center_y))

        if dot_type is DotType.CIRCLE:
            out.append(f'<circle cx="{fmt(cx)}" cy="{fmt(cy)}" r="{fmt(radius)}" fill="{color}"/>')
        elif dot_type is DotType.ROUNDED:
            rx = radius if options.rounded else dot * ROUNDED_DEFAULT_RATIO
            out.append(_rounded_rect(x, y, dot, rx, color))
        elif dot_type is DotType.EXTRA_ROUNDED:
            out.append(_rounded_rect(x, y, dot, dot * EXTRA_ROUNDED_RATIO, color))
        elif dot_type is DotType.CLASSY_ROUNDED:
            outer = dot * CLASSY_ROUNDED_OUTER_RATIO
            inner = outer * CLASSY_ROUNDED_INNER_RATIO
            out.append(f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(dot)}" height="{fmt(dot)}" '
                       f'rx="{fmt(outer)}" ry="{fmt(outer)}" fill="none" stroke="{color}" '
                       f'stroke-width="{fmt(outer - inner)}"/>')
            out.append(f'<circle cx="{fmt(cx)}" cy="{fmt(cy)}" '
                       f'r="{fmt(inner * CLASSY_ROUNDED_DOT_RATIO)}" fill="{color}"/>')
        elif dot_type is DotType.SQUARE:
            # Only reached with rounding enabled; plain squares are batched
            out.append(_rounded_rect(x, y, dot, radius, color))
        else:
            raise ValueError(f"Individual drawing does not handle {dot_type}")
    return out


def draw_modules(drawable: np.ndarray, geometry: Geometry, config: StyleConfig) -> List[str]:
    """
    Module group: one <g> carrying the shared fill, outline, and shadow filter.

    Args:
        drawable (np.ndarray): Drawable mask from build_drawable_mask
        geometry (Geometry): Pixel frame
        config (StyleConfig): Style in effect

    Returns:
        List[str]: SVG fragments, opening and closing the group
    """
    fill = escape_attr(module_fill(config))
    attrs = [f'fill="{fill}"']
    outline = config.advanced.module_outline
    if outline is not None:
        attrs.append(f'stroke="{escape_attr(outline.color)}" stroke-width="{fmt(outline.width)}"')
    if config.advanced.drop_shadow is not None:
        attrs.append(f'filter="url(#{SHADOW_ID})"')
    attrs.append('shape-rendering="crispEdges"')

    out = [f'<g {" ".join(attrs)}>']
    dot_type = config.modules.type
    if uses_batched_squares(config):
        out.append(f'<path d="{batched_square_path(drawable, geometry)}"/>')
    elif dot_type is DotType.CLASSY:
        out.extend(_classy_rings(drawable, geometry, fill))
    else:
        out.extend(_individual_modules(drawable, geometry, config, module_fill(config)))
    out.append('</g>')
    return out
