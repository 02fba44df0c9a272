# -*- coding: utf-8 -*-
"""
QR Style - Styled SVG rendering for QR codes

This package renders a QR module matrix into a richly styled, self-contained
SVG document: module shapes, gradients, background patterns, custom finder
locators, logos, borders and micro-typography.

Modules:
    config: Immutable style configuration (StyleConfig and its sections)
    builder: Fluent builder and style presets
    qr_generator: segno-backed encoder producing module matrices
    renderer: SVG rendering entry point
    params: Translation of raw string parameters into a StyleConfig
    logo: Raster logo embedding as data URIs
"""

__version__ = "1.0.0"

from .config import (
    AdvancedOptions, BackgroundPattern, BorderOptions, CircleLocator, ClassyLocator,
    ColorOptions, ColorStop, ConfigurationError, DotType, DropShadow, EccLevel,
    GradientMasking, GradientOptions, GradientType, LayoutOptions, LocatorOptions,
    LocatorShape, LogoOptions, MaskingType, MicroTypography, ModuleOptions,
    ModuleOutline, PatternType, QrOptions, QuietZoneAccent, RoundedLocator,
    SquareLocator, StyleConfig, TypographyPath,
)
from .matrix import ModuleMatrix
from .qr_generator import decode_payload, encode, encode_text, make_qr
from .renderer import render, render_bytes
from .builder import (
    QrCodeBuilder, custom, of_circles, of_classy_rings, of_classy_rounded,
    of_extra_rounded, of_rounded_squares, of_squares, to_qr_svg,
)
from .colors import PALETTE, interpolate_color
from .params import style_from_params

__all__ = [
    'StyleConfig', 'QrOptions', 'LayoutOptions', 'ModuleOptions', 'ColorOptions',
    'LogoOptions', 'LocatorOptions', 'GradientOptions', 'BorderOptions',
    'AdvancedOptions', 'ColorStop', 'ModuleOutline', 'QuietZoneAccent',
    'DropShadow', 'BackgroundPattern', 'GradientMasking', 'MicroTypography',
    'EccLevel', 'DotType', 'GradientType', 'PatternType', 'MaskingType',
    'TypographyPath', 'LocatorShape', 'SquareLocator', 'CircleLocator',
    'RoundedLocator', 'ClassyLocator',
    'ModuleMatrix',
    'make_qr', 'encode', 'encode_text', 'decode_payload',
    'render', 'render_bytes',
    'QrCodeBuilder', 'custom', 'of_squares', 'of_circles', 'of_rounded_squares',
    'of_extra_rounded', 'of_classy_rings', 'of_classy_rounded', 'to_qr_svg',
    'PALETTE', 'interpolate_color',
    'ConfigurationError', 'style_from_params',
]
