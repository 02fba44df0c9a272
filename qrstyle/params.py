# -*- coding: utf-8 -*-
"""
Parameter Translation Module

Translates flat string parameters (query strings, form fields, command-line
style options) into a validated StyleConfig. This is the only place where raw
user input is checked; the renderer trusts the values it receives.

Functions:
    style_from_params: Build a StyleConfig from a mapping of strings
    parse_enum: Case-insensitive enum lookup by name or value
    parse_gradient_stops: Parse "0:#ff0000,1:#0000ff"
"""

import math
from enum import Enum
from typing import List, Mapping, Optional, Tuple, Type, TypeVar

from .config import (
    AdvancedOptions, BackgroundPattern, BorderOptions, CircleLocator, ClassyLocator,
    ColorOptions, ColorStop, ConfigurationError, DotType, DropShadow, EccLevel,
    GradientMasking, GradientOptions, GradientType, LayoutOptions, LocatorOptions,
    LocatorShape, LogoOptions, MaskingType, MicroTypography, ModuleOptions,
    ModuleOutline, PatternType, QrOptions, QuietZoneAccent, RoundedLocator,
    SquareLocator, StyleConfig, TypographyPath,
)

E = TypeVar('E', bound=Enum)

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off', '')
_NO_COLOR = ('none', 'null', 'transparent')


def _get(params: Mapping[str, str], key: str) -> Optional[str]:
    value = params.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value if value != '' else None


def parse_enum(enum_cls: Type[E], raw: str, key: str) -> E:
    """
    Look up an enum member by name ('EXTRA_ROUNDED') or value ('extra-rounded').

    Raises:
        ConfigurationError: If nothing matches
    """
    wanted = raw.strip().lower().replace('_', '-')
    for member in enum_cls:
        if wanted in (member.name.lower().replace('_', '-'), str(member.value).lower()):
            return member
    choices = '|'.join(str(m.value).lower() for m in enum_cls)
    raise ConfigurationError(f"Invalid {key} '{raw}', expected one of {choices}")


def _float(params: Mapping[str, str], key: str, default: float) -> float:
    raw = _get(params, key)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"Parameter {key} must be a number, got '{raw}'") from None
    if not math.isfinite(value):
        raise ConfigurationError(f"Parameter {key} must be finite, got '{raw}'")
    return value


def _int(params: Mapping[str, str], key: str, default: int) -> int:
    raw = _get(params, key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Parameter {key} must be an integer, got '{raw}'") from None


def _bool(params: Mapping[str, str], key: str, default: bool = False) -> bool:
    raw = params.get(key)
    if raw is None:
        return default
    value = str(raw).strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"Parameter {key} must be a boolean, got '{raw}'")


def parse_gradient_stops(raw: str) -> Tuple[ColorStop, ...]:
    """
    Parse comma-separated "offset:color" pairs.

    Example:
        >>> parse_gradient_stops("0:#ff0000, 1:#0000ff")
        (ColorStop(offset=0.0, color='#ff0000'), ColorStop(offset=1.0, color='#0000ff'))
    """
    stops: List[ColorStop] = []
    for item in raw.split(','):
        item = item.strip()
        if not item:
            continue
        offset, sep, color = item.partition(':')
        if not sep or not color.strip():
            raise ConfigurationError(f"Gradient stop '{item}' must look like offset:color")
        try:
            stops.append(ColorStop(float(offset), color.strip()))
        except ValueError:
            raise ConfigurationError(f"Gradient stop offset '{offset}' is not a number") from None
    return tuple(stops)


def _locator_shape(params: Mapping[str, str]) -> Optional[LocatorShape]:
    raw = _get(params, 'corner_style')
    if raw is None:
        return None
    name = raw.lower()
    if name == 'square':
        return SquareLocator()
    if name == 'circle':
        return CircleLocator()
    if name == 'rounded':
        return RoundedLocator(_float(params, 'corner_radius', RoundedLocator.radius_factor))
    if name == 'classy':
        return ClassyLocator()
    raise ConfigurationError(f"Invalid corner_style '{raw}', expected one of square|circle|rounded|classy")


def _layout(params: Mapping[str, str]) -> LayoutOptions:
    defaults = LayoutOptions()
    size = _int(params, 'size', 0) if _get(params, 'size') is not None else None
    if size is not None and size <= 0:
        raise ConfigurationError(f"Parameter size must be positive, got {size}")
    width = _int(params, 'width', size or defaults.width)
    height = _int(params, 'height', size or defaults.height)
    margin = _int(params, 'margin', defaults.margin)
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Canvas size must be positive, got {width}x{height}")
    if margin < 0:
        raise ConfigurationError(f"Margin must not be negative, got {margin}")
    if 2 * margin >= min(width, height):
        raise ConfigurationError(f"Margin {margin} leaves no room on a {width}x{height} canvas")
    return LayoutOptions(width, height, margin, _bool(params, 'circle'))


def _qr_options(params: Mapping[str, str]) -> QrOptions:
    defaults = QrOptions()
    ecc_raw = _get(params, 'ec')
    ecc = parse_enum(EccLevel, ecc_raw, 'ec') if ecc_raw else defaults.ecc
    mask = _int(params, 'mask', defaults.mask)
    if mask != -1 and not 0 <= mask <= 7:
        raise ConfigurationError(f"Parameter mask must be -1 or 0-7, got {mask}")
    min_v = _int(params, 'min_version', defaults.min_version)
    max_v = _int(params, 'max_version', defaults.max_version)
    if not 1 <= min_v <= max_v <= 40:
        raise ConfigurationError(f"Version range [{min_v}, {max_v}] must lie within 1-40")
    return QrOptions(ecc, mask, min_v, max_v)


def _gradient(params: Mapping[str, str]) -> GradientOptions:
    raw = _get(params, 'gradient')
    if raw is None:
        return GradientOptions()
    grad_type = parse_enum(GradientType, raw, 'gradient')
    stops = parse_gradient_stops(_get(params, 'gradient_stops') or '')
    if len(stops) < 2:
        raise ConfigurationError("A gradient needs at least two gradient_stops")
    rotation = math.radians(_float(params, 'gradient_rotation', 0.0))
    return GradientOptions(grad_type, stops, rotation)


def _advanced(params: Mapping[str, str]) -> AdvancedOptions:
    outline = None
    if _bool(params, 'module_outline'):
        d = ModuleOutline()
        outline = ModuleOutline(_get(params, 'outline_color') or d.color,
                                _float(params, 'outline_width', d.width))

    accent = None
    if _bool(params, 'quiet_zone'):
        d = QuietZoneAccent()
        dash = params.get('quiet_dash')
        accent = QuietZoneAccent(_get(params, 'quiet_color') or d.color,
                                 _float(params, 'quiet_width', d.width),
                                 d.dash_pattern if dash is None else (dash.strip() or None))

    shadow = None
    if _bool(params, 'drop_shadow'):
        d = DropShadow()
        shadow = DropShadow(_float(params, 'shadow_blur', d.blur),
                            _float(params, 'shadow_opacity', d.opacity),
                            _float(params, 'shadow_x', d.offset_x),
                            _float(params, 'shadow_y', d.offset_y))

    pattern = None
    raw = _get(params, 'bg_pattern')
    if raw is not None:
        d = BackgroundPattern()
        size = _float(params, 'pattern_size', d.size)
        if size <= 0:
            raise ConfigurationError(f"Parameter pattern_size must be positive, got {size}")
        pattern = BackgroundPattern(parse_enum(PatternType, raw, 'bg_pattern'),
                                    _get(params, 'pattern_color') or d.color,
                                    _float(params, 'pattern_opacity', d.opacity),
                                    size)

    masking = None
    raw = _get(params, 'gradient_mask')
    if raw is not None:
        masking = GradientMasking(parse_enum(MaskingType, raw, 'gradient_mask'),
                                  _get(params, 'gradient_center'),
                                  _get(params, 'gradient_edge'))

    typography = None
    text = _get(params, 'micro_text')
    if text is not None:
        d = MicroTypography()
        path_raw = _get(params, 'micro_path')
        typography = MicroTypography(text,
                                     _float(params, 'micro_size', d.font_size),
                                     _get(params, 'micro_color') or d.color,
                                     parse_enum(TypographyPath, path_raw, 'micro_path') if path_raw else d.path)

    return AdvancedOptions(outline, accent, shadow, pattern, masking, typography)


def style_from_params(params: Mapping[str, str]) -> StyleConfig:
    """
    Build a StyleConfig from flat string parameters.

    Unset parameters keep the StyleConfig defaults. Keys follow the
    command-line vocabulary: width, height, size, margin, circle, dots,
    radius_factor, rounded, fg, bg, ec, mask, min_version, max_version,
    logo, logo_size, hole_radius, corner_style, corner_color, corner_size,
    corner_radius, gradient, gradient_stops, gradient_rotation (degrees),
    border_thickness, border_color, border_round, module_outline,
    outline_color, outline_width, quiet_zone, quiet_color, quiet_width, quiet_dash,
    drop_shadow, shadow_blur, shadow_opacity, shadow_x, shadow_y,
    bg_pattern, pattern_color, pattern_opacity, pattern_size,
    gradient_mask, gradient_center, gradient_edge, micro_text, micro_size,
    micro_color, micro_path.

    Args:
        params (Mapping[str, str]): Raw values, e.g. flask.request.values

    Returns:
        StyleConfig: Validated configuration

    Raises:
        ConfigurationError: On the first invalid parameter

    Example:
        >>> cfg = style_from_params({'dots': 'extra-rounded', 'bg': 'none', 'ec': 'h'})
        >>> cfg.modules.type, cfg.colors.background, cfg.qr.ecc
        (<DotType.EXTRA_ROUNDED: 'extra-rounded'>, None, <EccLevel.HIGH: 'H'>)
    """
    colors_default = ColorOptions()
    bg = params.get('bg')
    if bg is None:
        background = colors_default.background
    elif bg.strip().lower() in _NO_COLOR:
        background = None
    else:
        background = bg.strip() or colors_default.background
    colors = ColorOptions(_get(params, 'fg') or colors_default.foreground, background)

    module_defaults = ModuleOptions()
    dots_raw = _get(params, 'dots')
    modules = ModuleOptions(
        type=parse_enum(DotType, dots_raw, 'dots') if dots_raw else module_defaults.type,
        radius_factor=_float(params, 'radius_factor', module_defaults.radius_factor),
        rounded=_bool(params, 'rounded'),
    )

    logo_defaults = LogoOptions()
    hole = _get(params, 'hole_radius')
    logo = LogoOptions(
        href=_get(params, 'logo'),
        size_ratio=_float(params, 'logo_size', logo_defaults.size_ratio),
        hole_radius_px=_float(params, 'hole_radius', 0.0) if hole is not None else None,
    )

    locator_defaults = LocatorOptions()
    locators = LocatorOptions(
        shape=_locator_shape(params),
        color=_get(params, 'corner_color') or locator_defaults.color,
        size_ratio=_float(params, 'corner_size', locator_defaults.size_ratio),
    )

    border_defaults = BorderOptions()
    border = BorderOptions(
        thickness=_float(params, 'border_thickness', border_defaults.thickness),
        color=_get(params, 'border_color') or border_defaults.color,
        round=_float(params, 'border_round', border_defaults.round),
    )

    return StyleConfig(
        qr=_qr_options(params),
        layout=_layout(params),
        modules=modules,
        colors=colors,
        logo=logo,
        locators=locators,
        gradient=_gradient(params),
        border=border,
        advanced=_advanced(params),
    )
