# -*- coding: utf-8 -*-
"""
QR Code SVG Renderer Module

Turns a module matrix plus a StyleConfig into a self-contained SVG document.
Rendering is a pure function: no I/O, no shared state, identical inputs give
byte-identical output.

Drawing order (later elements paint over earlier ones):
    defs, background, borders, quiet-zone accent,
    [clip group: logo, locators, modules], micro-typography

Functions:
    render: Render a matrix to SVG text
    render_bytes: Same, UTF-8 encoded
"""

import logging
from typing import Any, Optional

from .config import StyleConfig
from .decorations import (
    draw_background, draw_borders, draw_locators, draw_logo,
    draw_micro_typography, draw_quiet_zone_accent,
)
from .defs import CLIP_ID, build_defs
from .functional_areas import build_drawable_mask
from .geometry import compute_geometry
from .matrix import as_module_matrix
from .modules import draw_modules

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'


def render(matrix: Any, config: Optional[StyleConfig] = None) -> str:
    """
    Render a QR module matrix as styled SVG.

    Args:
        matrix: ModuleMatrix, numpy array, or rows of truthy values
            (True=dark). Must be square; N >= 21 for real symbols
        config (Optional[StyleConfig]): Style; defaults to StyleConfig()

    Returns:
        str: Complete SVG document

    Example:
        >>> from qrstyle import encode_text, render
        >>> svg = render(encode_text("Hello"))
        >>> svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        True
    """
    config = config or StyleConfig()
    modules = as_module_matrix(matrix)
    layout = config.layout
    geometry = compute_geometry(modules.size, layout)
    drawable = build_drawable_mask(modules, config, geometry)

    logger.debug(
        f"Rendering {modules.size}x{modules.size} matrix as {config.modules.type.name} "
        f"on {layout.width}x{layout.height} canvas (module={geometry.module_size:.3f}px)"
    )

    out = [f'<svg xmlns="{SVG_NS}" width="{layout.width}" height="{layout.height}" '
           f'viewBox="0 0 {layout.width} {layout.height}">']
    out.extend(build_defs(config))
    out.extend(draw_background(config))
    out.extend(draw_borders(config.border, layout.width, layout.height))
    out.extend(draw_quiet_zone_accent(config, geometry))

    out.append(f'<g clip-path="url(#{CLIP_ID})">' if layout.circle_shape else '<g>')
    out.extend(draw_logo(config, geometry))
    out.extend(draw_locators(config, geometry))
    out.extend(draw_modules(drawable, geometry, config))
    out.append('</g>')

    out.extend(draw_micro_typography(config))
    out.append('</svg>')
    return ''.join(out)


def render_bytes(matrix: Any, config: Optional[StyleConfig] = None) -> bytes:
    return render(matrix, config).encode('utf-8')
