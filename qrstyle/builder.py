# -*- coding: utf-8 -*-
"""
Fluent QR Code Builder

Composes a StyleConfig one field at a time. The builder wraps a single frozen
StyleConfig and every call swaps it for an updated copy, so a config handed
out by .config is never affected by later calls.

Example:
    >>> from qrstyle import RoundedLocator, of_circles
    >>> svg = (of_circles()
    ...        .size(300)
    ...        .with_color('#1e3a8a')
    ...        .corner_locator(RoundedLocator())
    ...        .drop_shadow()
    ...        .build_svg("https://example.com"))
"""

import math
from dataclasses import replace
from typing import Iterable, Optional, Tuple, Union

from .config import (
    BackgroundPattern, BorderOptions, ColorStop, DotType, DropShadow, EccLevel,
    GradientMasking, GradientOptions, GradientType, LocatorShape, MaskingType,
    MicroTypography, ModuleOutline, PatternType, QuietZoneAccent, StyleConfig,
    TypographyPath,
)
from .matrix import ModuleMatrix
from .qr_generator import encode_with_options, from_utf8
from .renderer import render

StopLike = Union[ColorStop, Tuple[float, str]]


def _stops(stops: Iterable[StopLike]) -> Tuple[ColorStop, ...]:
    return tuple(s if isinstance(s, ColorStop) else ColorStop(float(s[0]), s[1]) for s in stops)


class QrCodeBuilder:
    """Copy-on-write builder around an immutable StyleConfig."""

    def __init__(self, config: Optional[StyleConfig] = None):
        self._config = config or StyleConfig()

    @property
    def config(self) -> StyleConfig:
        return self._config

    def _update(self, **sections) -> 'QrCodeBuilder':
        self._config = replace(self._config, **sections)
        return self

    # Layout

    def width(self, pixels: int) -> 'QrCodeBuilder':
        return self._update(layout=replace(self._config.layout, width=pixels))

    def height(self, pixels: int) -> 'QrCodeBuilder':
        return self._update(layout=replace(self._config.layout, height=pixels))

    def size(self, pixels: int) -> 'QrCodeBuilder':
        return self._update(layout=replace(self._config.layout, width=pixels, height=pixels))

    def margin(self, pixels: int) -> 'QrCodeBuilder':
        return self._update(layout=replace(self._config.layout, margin=pixels))

    def circle_shape(self, enabled: bool = True) -> 'QrCodeBuilder':
        return self._update(layout=replace(self._config.layout, circle_shape=enabled))

    # Encoder options

    def error_correction(self, level: EccLevel) -> 'QrCodeBuilder':
        return self._update(qr=replace(self._config.qr, ecc=level))

    def mask(self, pattern: int) -> 'QrCodeBuilder':
        return self._update(qr=replace(self._config.qr, mask=pattern))

    def version_range(self, min_version: int, max_version: int) -> 'QrCodeBuilder':
        return self._update(qr=replace(self._config.qr, min_version=min_version, max_version=max_version))

    # Colors

    def with_color(self, color: str) -> 'QrCodeBuilder':
        return self._update(colors=replace(self._config.colors, foreground=color))

    def with_background(self, color: Optional[str]) -> 'QrCodeBuilder':
        return self._update(colors=replace(self._config.colors, background=color))

    def transparent(self) -> 'QrCodeBuilder':
        return self.with_background(None)

    # Modules

    def dot_style(self, type: Optional[DotType] = None, radius_factor: Optional[float] = None,
                  rounded: Optional[bool] = None, extra_rounded: Optional[bool] = None,
                  classy_rounded: Optional[bool] = None) -> 'QrCodeBuilder':
        changes = {k: v for k, v in dict(type=type, radius_factor=radius_factor, rounded=rounded,
                                         extra_rounded=extra_rounded,
                                         classy_rounded=classy_rounded).items() if v is not None}
        return self._update(modules=replace(self._config.modules, **changes))

    # Logo

    def center_image(self, href: str, size_ratio: float = 0.2) -> 'QrCodeBuilder':
        return self._update(logo=replace(self._config.logo, href=href, size_ratio=size_ratio))

    def logo_hole(self, radius_px: Optional[float]) -> 'QrCodeBuilder':
        return self._update(logo=replace(self._config.logo, hole_radius_px=radius_px))

    # Locators

    def corner_locator(self, shape: Optional[LocatorShape], color: Optional[str] = None,
                       size_ratio: Optional[float] = None) -> 'QrCodeBuilder':
        locators = replace(self._config.locators, shape=shape)
        if color is not None:
            locators = replace(locators, color=color)
        if size_ratio is not None:
            locators = replace(locators, size_ratio=size_ratio)
        return self._update(locators=locators)

    # Gradients

    def linear_gradient(self, stops: Iterable[StopLike], rotation_deg: float = 0.0) -> 'QrCodeBuilder':
        return self._update(gradient=GradientOptions(GradientType.LINEAR, _stops(stops),
                                                     math.radians(rotation_deg)))

    def radial_gradient(self, stops: Iterable[StopLike]) -> 'QrCodeBuilder':
        return self._update(gradient=GradientOptions(GradientType.RADIAL, _stops(stops)))

    def no_gradient(self) -> 'QrCodeBuilder':
        return self._update(gradient=GradientOptions())

    # Border

    def border(self, thickness: float, color: str = '#000000', round: float = 0.0,
               inner: Optional[BorderOptions] = None,
               outer: Optional[BorderOptions] = None) -> 'QrCodeBuilder':
        return self._update(border=BorderOptions(thickness, color, round, inner, outer))

    # Advanced overlays

    def _advanced(self, **changes) -> 'QrCodeBuilder':
        return self._update(advanced=replace(self._config.advanced, **changes))

    def module_outline(self, color: str = '#111111', width: float = 0.5) -> 'QrCodeBuilder':
        return self._advanced(module_outline=ModuleOutline(color, width))

    def quiet_zone_accent(self, color: str = '#444444', width: float = 1.0,
                          dash_pattern: Optional[str] = '4 4') -> 'QrCodeBuilder':
        return self._advanced(quiet_zone_accent=QuietZoneAccent(color, width, dash_pattern))

    def drop_shadow(self, blur: float = 1.0, opacity: float = 0.2,
                    offset_x: float = 0.0, offset_y: float = 0.0) -> 'QrCodeBuilder':
        return self._advanced(drop_shadow=DropShadow(blur, opacity, offset_x, offset_y))

    def background_pattern(self, type: PatternType = PatternType.DOTS, color: str = '#f0f0f0',
                           opacity: float = 0.02, size: float = 4.0) -> 'QrCodeBuilder':
        return self._advanced(background_pattern=BackgroundPattern(type, color, opacity, size))

    def gradient_masking(self, type: MaskingType = MaskingType.CONCENTRIC,
                         center_color: Optional[str] = None,
                         edge_color: Optional[str] = None) -> 'QrCodeBuilder':
        return self._advanced(gradient_masking=GradientMasking(type, center_color, edge_color))

    def micro_typography(self, text: str, font_size: float = 8.0, color: str = '#666666',
                         path: TypographyPath = TypographyPath.CIRCULAR) -> 'QrCodeBuilder':
        return self._advanced(micro_typography=MicroTypography(text, font_size, color, path))

    # Build

    def build(self, data: Union[str, bytes]) -> ModuleMatrix:
        """Encode data (str as UTF-8) with this builder's QR options."""
        payload = from_utf8(data) if isinstance(data, str) else bytes(data)
        return encode_with_options(payload, self._config.qr)

    def build_svg(self, data: Union[str, bytes]) -> str:
        return render(self.build(data), self._config)


def custom() -> QrCodeBuilder:
    return QrCodeBuilder()


def of_squares() -> QrCodeBuilder:
    return QrCodeBuilder().dot_style(type=DotType.SQUARE)


def of_circles() -> QrCodeBuilder:
    return QrCodeBuilder().dot_style(type=DotType.CIRCLE)


def of_rounded_squares() -> QrCodeBuilder:
    return QrCodeBuilder().dot_style(type=DotType.ROUNDED)


def of_extra_rounded() -> QrCodeBuilder:
    return QrCodeBuilder().dot_style(type=DotType.EXTRA_ROUNDED)


def of_classy_rings() -> QrCodeBuilder:
    return QrCodeBuilder().dot_style(type=DotType.CLASSY)


def of_classy_rounded() -> QrCodeBuilder:
    return QrCodeBuilder().dot_style(type=DotType.CLASSY_ROUNDED)


def to_qr_svg(data: Union[str, bytes], config: Optional[StyleConfig] = None) -> str:
    """Encode and render in one call."""
    return QrCodeBuilder(config).build_svg(data)
