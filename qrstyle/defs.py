# -*- coding: utf-8 -*-
"""
SVG Definitions Module

Builds the declarative resources placed once inside <defs>: background pattern,
drop-shadow filter, global gradient, circular clip path, and the circular text
path used by micro-typography.

Element ids are fixed so drawing steps can reference them:
    bgPattern, dropShadow, grad0, clipCircle, circularPath
"""

import math
from typing import List

from .config import (
    BackgroundPattern, DropShadow, GradientOptions, GradientType, LayoutOptions,
    MicroTypography, PatternType, StyleConfig, TypographyPath, clamp,
)
from .formatting import escape_attr, fmt, fmt_pct

PATTERN_ID = 'bgPattern'
SHADOW_ID = 'dropShadow'
GRADIENT_ID = 'grad0'
CLIP_ID = 'clipCircle'
TEXT_PATH_ID = 'circularPath'

PATTERN_STROKE = 0.5


def build_defs(config: StyleConfig) -> List[str]:
    """Return the <defs> block as a list of SVG fragments."""
    out = ['<defs>']
    advanced = config.advanced

    if advanced.background_pattern is not None:
        out.append(background_pattern(advanced.background_pattern))
    if advanced.drop_shadow is not None:
        out.append(drop_shadow_filter(advanced.drop_shadow))
    if config.gradient.type is not None:
        out.append(gradient(config.gradient, config.layout))
    if config.layout.circle_shape:
        out.append(circle_clip_path(config.layout))
    typo = advanced.micro_typography
    if typo is not None and typo.text and typo.path is TypographyPath.CIRCULAR:
        out.append(circular_text_path(typo, config.layout))

    out.append('</defs>')
    return out


def background_pattern(pattern: BackgroundPattern) -> str:
    """Tileable <pattern> holding a single dot, grid cell, cross, or hexagon."""
    size = pattern.size
    half = size / 2.0
    color = escape_attr(pattern.color)
    opacity = fmt(clamp(pattern.opacity))
    stroke = fmt(PATTERN_STROKE)

    if pattern.type is PatternType.DOTS:
        shape = (f'<circle cx="{fmt(half)}" cy="{fmt(half)}" r="{fmt(size * 0.2)}" '
                 f'fill="{color}" opacity="{opacity}"/>')
    elif pattern.type is PatternType.GRID:
        shape = (f'<rect width="{fmt(size)}" height="{fmt(size)}" fill="none" '
                 f'stroke="{color}" stroke-width="{stroke}" opacity="{opacity}"/>')
    elif pattern.type is PatternType.DIAGONAL:
        shape = (f'<path d="M0,0 L{fmt(size)},{fmt(size)} M0,{fmt(size)} L{fmt(size)},0" '
                 f'stroke="{color}" stroke-width="{stroke}" opacity="{opacity}"/>')
    elif pattern.type is PatternType.HEXAGON:
        shape = (f'<path d="{hexagon_path(size * 0.4, half, half)}" fill="none" '
                 f'stroke="{color}" stroke-width="{stroke}" opacity="{opacity}"/>')
    else:
        raise ValueError(f"Unknown pattern type: {pattern.type}")

    return (f'<pattern id="{PATTERN_ID}" patternUnits="userSpaceOnUse" '
            f'width="{fmt(size)}" height="{fmt(size)}">{shape}</pattern>')


def hexagon_path(radius: float, cx: float, cy: float) -> str:
    points = []
    for i in range(6):
        angle = i * math.pi / 3.0
        points.append(f"{fmt(cx + radius * math.cos(angle))},{fmt(cy + radius * math.sin(angle))}")
    return 'M' + points[0] + ''.join(f' L{p}' for p in points[1:]) + ' Z'


def drop_shadow_filter(shadow: DropShadow) -> str:
    """Blur -> offset -> flood -> composite -> merge with the source graphic."""
    return (
        f'<filter id="{SHADOW_ID}" x="-20%" y="-20%" width="140%" height="140%">'
        f'<feGaussianBlur in="SourceAlpha" stdDeviation="{fmt(shadow.blur)}" result="blur"/>'
        f'<feOffset in="blur" dx="{fmt(shadow.offset_x)}" dy="{fmt(shadow.offset_y)}" result="offsetBlur"/>'
        f'<feFlood flood-color="black" flood-opacity="{fmt(clamp(shadow.opacity))}" result="shadowColor"/>'
        '<feComposite in="shadowColor" in2="offsetBlur" operator="in" result="shadow"/>'
        '<feMerge><feMergeNode in="shadow"/><feMergeNode in="SourceGraphic"/></feMerge>'
        '</filter>'
    )


def linear_endpoints(rotation_rad: float, width: float, height: float):
    """
    Gradient line through the canvas center at the given angle.

    The line extends the longer canvas side from the center in both
    directions, so it spans the diagonal at any rotation.
    """
    cx, cy = width / 2.0, height / 2.0
    dx, dy = math.cos(rotation_rad), math.sin(rotation_rad)
    half = max(width, height)
    return cx - dx * half, cy - dy * half, cx + dx * half, cy + dy * half


def _stops(options: GradientOptions) -> str:
    return ''.join(
        f'<stop offset="{fmt_pct(clamp(stop.offset))}" stop-color="{escape_attr(stop.color)}"/>'
        for stop in options.stops
    )


def gradient(options: GradientOptions, layout: LayoutOptions) -> str:
    if options.type is GradientType.LINEAR:
        x1, y1, x2, y2 = linear_endpoints(options.rotation_rad, layout.width, layout.height)
        return (f'<linearGradient id="{GRADIENT_ID}" gradientUnits="userSpaceOnUse" '
                f'x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}">'
                f'{_stops(options)}</linearGradient>')
    if options.type is GradientType.RADIAL:
        return (f'<radialGradient id="{GRADIENT_ID}" gradientUnits="userSpaceOnUse" '
                f'cx="{fmt(layout.width / 2.0)}" cy="{fmt(layout.height / 2.0)}" '
                f'r="{fmt(max(layout.width, layout.height) / 2.0)}">'
                f'{_stops(options)}</radialGradient>')
    raise ValueError(f"Unknown gradient type: {options.type}")


def circle_clip_path(layout: LayoutOptions) -> str:
    r = min(layout.width, layout.height) / 2.0
    return (f'<clipPath id="{CLIP_ID}"><circle cx="{fmt(layout.width / 2.0)}" '
            f'cy="{fmt(layout.height / 2.0)}" r="{fmt(r)}"/></clipPath>')


def circular_text_path(typo: MicroTypography, layout: LayoutOptions) -> str:
    """Near-complete clockwise circle starting at the top center of the canvas."""
    cx, cy = layout.width / 2.0, layout.height / 2.0
    radius = min(layout.width, layout.height) / 2.0 - typo.font_size
    top = cy - radius
    return (f'<path id="{TEXT_PATH_ID}" d="M {fmt(cx)},{fmt(top)} '
            f'A {fmt(radius)},{fmt(radius)} 0 1,1 {fmt(cx - 1)},{fmt(top)}"/>')
