# -*- coding: utf-8 -*-
"""
QR Style Configuration Module

This module defines the immutable, hierarchical style configuration consumed by
the SVG renderer. Every visual knob lives in a small frozen dataclass, and the
complete configuration (StyleConfig) composes them by value. "Changing" a value
always means building a copy with dataclasses.replace().

Classes:
    StyleConfig: Complete styling configuration
    QrOptions, LayoutOptions, ModuleOptions, ColorOptions, LogoOptions,
    LocatorOptions, GradientOptions, BorderOptions, AdvancedOptions:
        Sub-configurations composed into StyleConfig
    SquareLocator, CircleLocator, RoundedLocator, ClassyLocator:
        Closed set of finder-pattern shape overrides (LocatorShape)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class EccLevel(Enum):
    """Error correction level, valued with the single-letter name segno expects."""
    LOW = 'L'
    MEDIUM = 'M'
    QUARTILE = 'Q'
    HIGH = 'H'


class DotType(Enum):
    CIRCLE = 'circle'
    SQUARE = 'square'
    CLASSY = 'classy'
    ROUNDED = 'rounded'
    EXTRA_ROUNDED = 'extra-rounded'
    CLASSY_ROUNDED = 'classy-rounded'


class GradientType(Enum):
    LINEAR = 'linear'
    RADIAL = 'radial'


class PatternType(Enum):
    DOTS = 'dots'
    GRID = 'grid'
    DIAGONAL = 'diagonal'
    HEXAGON = 'hexagon'


class MaskingType(Enum):
    CONCENTRIC = 'concentric'
    RADIAL = 'radial'
    LINEAR = 'linear'


class TypographyPath(Enum):
    CIRCULAR = 'circular'
    TOP = 'top'
    BOTTOM = 'bottom'


# Finder-pattern shape overrides. A closed set: renderers match on these four
# classes and nothing else.

@dataclass(frozen=True)
class SquareLocator:
    pass


@dataclass(frozen=True)
class CircleLocator:
    pass


@dataclass(frozen=True)
class RoundedLocator:
    radius_factor: float = 0.35


@dataclass(frozen=True)
class ClassyLocator:
    pass


LocatorShape = Union[SquareLocator, CircleLocator, RoundedLocator, ClassyLocator]


@dataclass(frozen=True)
class QrOptions:
    """Encoder parameters. mask=-1 lets the encoder pick the mask."""
    ecc: EccLevel = EccLevel.QUARTILE
    mask: int = -1
    min_version: int = 1
    max_version: int = 40


@dataclass(frozen=True)
class LayoutOptions:
    """
    Canvas geometry in pixels.

    Attributes:
        width (int): Canvas width
        height (int): Canvas height
        margin (int): Blank space kept on every side of the symbol
        circle_shape (bool): Crop the symbol, logo and locators into a circle
    """
    width: int = 512
    height: int = 512
    margin: int = 16
    circle_shape: bool = False


@dataclass(frozen=True)
class ModuleOptions:
    """
    Module (dot) styling.

    Attributes:
        type (DotType): Shape variant drawn for every dark module
        radius_factor (float): Fraction of the module size (0.0-0.5) used as
            circle radius or corner radius
        rounded (bool): Use radius_factor for corner rounding of SQUARE/ROUNDED
        extra_rounded (bool): Refinement flag carried for API compatibility
        classy_rounded (bool): Refinement flag carried for API compatibility
    """
    type: DotType = DotType.CIRCLE
    radius_factor: float = 0.5
    rounded: bool = False
    extra_rounded: bool = False
    classy_rounded: bool = False


@dataclass(frozen=True)
class ColorOptions:
    """Foreground color and optional background (None means transparent)."""
    foreground: str = '#000000'
    background: Optional[str] = '#ffffff'


@dataclass(frozen=True)
class LogoOptions:
    """
    Center image and logo hole.

    The hole is independent of the image: a hole without href carves a blank
    disc out of the modules and draws nothing else.
    """
    href: Optional[str] = None
    size_ratio: float = 0.2
    hole_radius_px: Optional[float] = None


@dataclass(frozen=True)
class LocatorOptions:
    """Finder-pattern override. shape=None keeps the encoder's own finders."""
    shape: Optional[LocatorShape] = None
    color: str = '#000000'
    size_ratio: float = 7.0


@dataclass(frozen=True)
class ColorStop:
    offset: float
    color: str


@dataclass(frozen=True)
class GradientOptions:
    """Global fill gradient. rotation_rad only affects LINEAR gradients."""
    type: Optional[GradientType] = None
    stops: Tuple[ColorStop, ...] = ()
    rotation_rad: float = 0.0


@dataclass(frozen=True)
class BorderOptions:
    """
    Stroke-only canvas border.

    inner and outer are independent borders drawn as extra rectangles;
    they nest recursively but are never scaled from their parent.
    """
    thickness: float = 0.0
    color: str = '#000000'
    round: float = 0.0
    inner: Optional['BorderOptions'] = None
    outer: Optional['BorderOptions'] = None


@dataclass(frozen=True)
class ModuleOutline:
    color: str = '#111111'
    width: float = 0.5


@dataclass(frozen=True)
class QuietZoneAccent:
    color: str = '#444444'
    width: float = 1.0
    dash_pattern: Optional[str] = '4 4'


@dataclass(frozen=True)
class DropShadow:
    blur: float = 1.0
    opacity: float = 0.2
    offset_x: float = 0.0
    offset_y: float = 0.0


@dataclass(frozen=True)
class BackgroundPattern:
    type: PatternType = PatternType.DOTS
    color: str = '#f0f0f0'
    opacity: float = 0.02
    size: float = 4.0


@dataclass(frozen=True)
class GradientMasking:
    """Per-module color blend. Unset colors fall back to the module fill."""
    type: MaskingType = MaskingType.CONCENTRIC
    center_color: Optional[str] = None
    edge_color: Optional[str] = None


@dataclass(frozen=True)
class MicroTypography:
    text: str = ''
    font_size: float = 8.0
    color: str = '#666666'
    path: TypographyPath = TypographyPath.CIRCULAR


@dataclass(frozen=True)
class AdvancedOptions:
    """Optional overlays. An overlay is enabled when it is not None."""
    module_outline: Optional[ModuleOutline] = None
    quiet_zone_accent: Optional[QuietZoneAccent] = None
    drop_shadow: Optional[DropShadow] = None
    background_pattern: Optional[BackgroundPattern] = None
    gradient_masking: Optional[GradientMasking] = None
    micro_typography: Optional[MicroTypography] = None


@dataclass(frozen=True)
class StyleConfig:
    """
    Complete QR styling configuration.

    Example:
        >>> from dataclasses import replace
        >>> config = StyleConfig()
        >>> wide = replace(config, layout=replace(config.layout, width=800))
        >>> config.layout.width, wide.layout.width
        (512, 800)
    """
    qr: QrOptions = field(default_factory=QrOptions)
    layout: LayoutOptions = field(default_factory=LayoutOptions)
    modules: ModuleOptions = field(default_factory=ModuleOptions)
    colors: ColorOptions = field(default_factory=ColorOptions)
    logo: LogoOptions = field(default_factory=LogoOptions)
    locators: LocatorOptions = field(default_factory=LocatorOptions)
    gradient: GradientOptions = field(default_factory=GradientOptions)
    border: BorderOptions = field(default_factory=BorderOptions)
    advanced: AdvancedOptions = field(default_factory=AdvancedOptions)


class ConfigurationError(ValueError):
    """Raised when a raw value cannot be turned into a style or payload value."""


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp a ratio or opacity into [low, high]."""
    return max(low, min(high, value))
