# -*- coding: utf-8 -*-
"""
Logo embedding helpers.

Turns a raster image into a PNG data URI usable as LogoOptions.href, so the
rendered SVG stays self-contained.
"""

import base64
from io import BytesIO
from typing import BinaryIO, Union

from PIL import Image

DEFAULT_MAX_PX = 512


def logo_data_uri(image: Image.Image, max_px: int = DEFAULT_MAX_PX) -> str:
    """
    Encode an image as a base64 PNG data URI.

    The image is converted to RGBA (keeping transparency) and shrunk so its
    longer side is at most max_px, preserving the aspect ratio.

    Args:
        image (Image.Image): Source image (any mode)
        max_px (int): Longest side of the embedded image

    Returns:
        str: 'data:image/png;base64,...'

    Example:
        >>> uri = logo_data_uri(Image.new('RGB', (64, 64), 'red'))
        >>> uri.startswith('data:image/png;base64,')
        True
    """
    img = image.convert('RGBA')
    if max(img.size) > max_px:
        img.thumbnail((max_px, max_px), Image.LANCZOS)
    buffer = BytesIO()
    img.save(buffer, format='PNG')
    b64 = base64.b64encode(buffer.getvalue()).decode('ascii')
    return f"data:image/png;base64,{b64}"


def load_logo(source: Union[str, BinaryIO], max_px: int = DEFAULT_MAX_PX) -> str:
    """
    Open an image file (path or binary stream) and return its data URI.

    Raises:
        PIL.UnidentifiedImageError: If the data is not a readable image
    """
    with Image.open(source) as image:
        return logo_data_uri(image, max_px)
