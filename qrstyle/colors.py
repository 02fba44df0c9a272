# -*- coding: utf-8 -*-
"""
Color Utilities Module

Palette constants, hex color parsing, and the per-module gradient masking used
by the individual-module drawing path.

Functions:
    parse_hex_color: Parse '#rrggbb' into an (r, g, b) tuple
    interpolate_color: Blend two hex colors channel by channel
    masking_ratio: Position-dependent blend parameter for gradient masking
    apply_gradient_masking: Resolve a module's fill color
"""

import math
import re
from typing import Optional, Tuple

from .config import GradientMasking, MaskingType, clamp

# Named colors for convenience (hex, lowercase)
PALETTE = {
    'black': '#000000',
    'white': '#ffffff',
    'deep_sky_blue': '#00bfff',
    'forest_green': '#228b22',
    'crimson': '#dc143c',
    'gold': '#ffd700',
    'dark_violet': '#9400d3',
    'orange_red': '#ff4500',
    'steel_blue': '#4682b4',
    'dark_slate_gray': '#2f4f4f',
}

_HEX_COLOR = re.compile(r'^#([0-9a-fA-F]{6})$')


def parse_hex_color(color: str) -> Optional[Tuple[int, int, int]]:
    """
    Parse a '#rrggbb' color.

    Returns:
        Optional[Tuple[int, int, int]]: Channels 0-255, or None when the
            string is not a six-digit hex color ('#fff', 'red', 'url(#g)')
    """
    match = _HEX_COLOR.match(color or '')
    if match is None:
        return None
    value = int(match.group(1), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def interpolate_color(start: str, end: str, ratio: float) -> str:
    """
    Linear RGB blend between two hex colors.

    Each channel is blended independently, truncated toward zero and clamped
    to 0-255. If either color is not '#rrggbb' the start color is returned
    unchanged, so callers always get something usable as an SVG paint.

    Args:
        start (str): Color at ratio 0
        end (str): Color at ratio 1
        ratio (float): Blend parameter

    Returns:
        str: Lowercase '#rrggbb' color (or start, unmodified)

    Example:
        >>> interpolate_color('#000000', '#ffffff', 0.5)
        '#7f7f7f'
    """
    a = parse_hex_color(start)
    b = parse_hex_color(end)
    if a is None or b is None:
        return start

    channels = []
    for s, e in zip(a, b):
        value = int(s + (e - s) * ratio)
        channels.append(max(0, min(255, value)))
    return '#%02x%02x%02x' % tuple(channels)


def masking_ratio(mask_type: MaskingType, x: float, y: float, cx: float, cy: float) -> float:
    """Blend parameter in [0, 1] for a module centered at (x, y)."""
    if mask_type is MaskingType.LINEAR:
        return clamp(x / (cx * 2)) if cx else 0.0

    distance = math.hypot(x - cx, y - cy)
    if mask_type is MaskingType.CONCENTRIC:
        reach = math.hypot(cx, cy)
    elif mask_type is MaskingType.RADIAL:
        reach = min(cx, cy)
    else:
        raise ValueError(f"Unknown masking type: {mask_type}")
    if reach <= 0:
        return 0.0
    return clamp(distance / reach)


def apply_gradient_masking(
    masking: Optional[GradientMasking],
    default_color: str,
    x: float,
    y: float,
    cx: float,
    cy: float
) -> str:
    """
    Fill color for one module.

    Args:
        masking (Optional[GradientMasking]): Masking overlay, None when disabled
        default_color (str): Shared module fill (flat color or gradient url)
        x, y (float): Module center in pixels
        cx, cy (float): Canvas center in pixels
    """
    if masking is None:
        return default_color
    ratio = masking_ratio(masking.type, x, y, cx, cy)
    return interpolate_color(
        masking.center_color or default_color,
        masking.edge_color or default_color,
        ratio,
    )
