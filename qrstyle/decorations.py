# -*- coding: utf-8 -*-
"""
Decorations Module

Everything drawn around the modules: background, borders, quiet-zone accent,
center logo, custom finder-pattern locators, and micro-typography.

Functions:
    draw_background: Flat or patterned canvas fill
    draw_borders: Stroke-only canvas borders, including nested specs
    draw_quiet_zone_accent: Rectangle one module outside the symbol
    draw_logo: Centered <image>
    locator_origins: Top-left module of each locator
    draw_locators: Custom finder-pattern shapes
    draw_micro_typography: Text on a circle, or along the top/bottom edge
"""

from typing import List, Optional, Tuple

from .config import (
    BorderOptions, CircleLocator, ClassyLocator, RoundedLocator, SquareLocator,
    StyleConfig, TypographyPath, clamp,
)
from .defs import PATTERN_ID, TEXT_PATH_ID
from .formatting import escape_attr, escape_text, fmt
from .geometry import Geometry

CLASSY_LOCATOR_STROKE = 0.15
CLASSY_LOCATOR_GAP = 1.2
BOTTOM_TEXT_OFFSET = 4


def draw_background(config: StyleConfig) -> List[str]:
    """Pattern fill wins over the flat color. Nothing is drawn when both are unset."""
    if config.advanced.background_pattern is not None:
        fill = f'url(#{PATTERN_ID})'
    elif config.colors.background is not None:
        fill = escape_attr(config.colors.background)
    else:
        return []
    return [f'<rect width="{config.layout.width}" height="{config.layout.height}" fill="{fill}"/>']


def _border_rect(border: BorderOptions, width: float, height: float) -> str:
    th = border.thickness
    off = th / 2.0
    rx = min(width, height) / 2.0 * clamp(border.round)
    parts = [f'<rect x="{fmt(off)}" y="{fmt(off)}" width="{fmt(width - th)}" height="{fmt(height - th)}" '
             f'fill="none" stroke="{escape_attr(border.color)}" stroke-width="{fmt(th)}"']
    if rx > 0:
        parts.append(f' rx="{fmt(rx)}" ry="{fmt(rx)}"')
    parts.append('/>')
    return ''.join(parts)


def draw_borders(border: Optional[BorderOptions], width: float, height: float) -> List[str]:
    """
    One rectangle per border with a positive thickness, then the inner
    border, then the outer border, each handled recursively.
    """
    if border is None:
        return []
    out = []
    if border.thickness > 0:
        out.append(_border_rect(border, width, height))
    out.extend(draw_borders(border.inner, width, height))
    out.extend(draw_borders(border.outer, width, height))
    return out


def draw_quiet_zone_accent(config: StyleConfig, geometry: Geometry) -> List[str]:
    accent = config.advanced.quiet_zone_accent
    if accent is None:
        return []
    dot = geometry.module_size
    side = (geometry.count + 2) * dot
    dash = f' stroke-dasharray="{escape_attr(accent.dash_pattern)}"' if accent.dash_pattern else ''
    return [f'<rect x="{fmt(geometry.origin_x - dot)}" y="{fmt(geometry.origin_y - dot)}" '
            f'width="{fmt(side)}" height="{fmt(side)}" fill="none" '
            f'stroke="{escape_attr(accent.color)}" stroke-width="{fmt(accent.width)}"{dash}/>']


def draw_logo(config: StyleConfig, geometry: Geometry) -> List[str]:
    """Centered square image sized against the drawable area. A bare hole draws nothing."""
    href = config.logo.href
    if not href:
        return []
    size = geometry.drawable_size * clamp(config.logo.size_ratio)
    x = (geometry.width - size) / 2.0
    y = (geometry.height - size) / 2.0
    return [f'<image href="{escape_attr(href)}" x="{fmt(x)}" y="{fmt(y)}" '
            f'width="{fmt(size)}" height="{fmt(size)}" preserveAspectRatio="xMidYMid meet"/>']


def locator_origins(count: int, size_ratio: float) -> List[Tuple[int, int]]:
    """
    (col, row) of the top-left module of each locator: TL, TR, BL.

    Example:
        >>> locator_origins(21, 7.0)
        [(0, 0), (14, 0), (0, 14)]
    """
    far = int(count - size_ratio)
    return [(0, 0), (far, 0), (0, far)]


def draw_locators(config: StyleConfig, geometry: Geometry) -> List[str]:
    shape = config.locators.shape
    if shape is None:
        return []

    dot = geometry.module_size
    size = dot * config.locators.size_ratio
    color = escape_attr(config.locators.color)
    out = []

    for col, row in locator_origins(geometry.count, config.locators.size_ratio):
        x = geometry.origin_x + col * dot
        y = geometry.origin_y + row * dot
        if isinstance(shape, SquareLocator):
            out.append(f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(size)}" height="{fmt(size)}" fill="{color}"/>')
        elif isinstance(shape, CircleLocator):
            r = size / 2.0
            out.append(f'<circle cx="{fmt(x + r)}" cy="{fmt(y + r)}" r="{fmt(r)}" fill="{color}"/>')
        elif isinstance(shape, RoundedLocator):
            rx = size * shape.radius_factor
            out.append(f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(size)}" height="{fmt(size)}" '
                       f'rx="{fmt(rx)}" ry="{fmt(rx)}" fill="{color}"/>')
        elif isinstance(shape, ClassyLocator):
            cx, cy = x + size / 2.0, y + size / 2.0
            sw = size * CLASSY_LOCATOR_STROKE
            outer = size / 2.0 - sw / 2.0
            inner = outer - sw * CLASSY_LOCATOR_GAP
            out.append(f'<circle cx="{fmt(cx)}" cy="{fmt(cy)}" r="{fmt(outer)}" fill="none" '
                       f'stroke="{color}" stroke-width="{fmt(sw)}"/>')
            out.append(f'<circle cx="{fmt(cx)}" cy="{fmt(cy)}" r="{fmt(inner)}" fill="{color}"/>')
        else:
            raise ValueError(f"Unknown locator shape: {shape!r}")
    return out


def draw_micro_typography(config: StyleConfig) -> List[str]:
    """Text outside the clip group. The circular path itself lives in <defs>."""
    typo = config.advanced.micro_typography
    if typo is None or not typo.text:
        return []

    text = escape_text(typo.text)
    size = fmt(typo.font_size)
    color = escape_attr(typo.color)
    layout = config.layout

    if typo.path is TypographyPath.CIRCULAR:
        return [f'<text font-size="{size}" fill="{color}">'
                f'<textPath href="#{TEXT_PATH_ID}">{text}</textPath></text>']
    if typo.path is TypographyPath.TOP:
        y = typo.font_size
    elif typo.path is TypographyPath.BOTTOM:
        y = layout.height - BOTTOM_TEXT_OFFSET
    else:
        raise ValueError(f"Unknown typography path: {typo.path}")
    return [f'<text x="{fmt(layout.width / 2.0)}" y="{fmt(y)}" text-anchor="middle" '
            f'font-size="{size}" fill="{color}">{text}</text>']
