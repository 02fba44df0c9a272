# -*- coding: utf-8 -*-
"""
QR Code Generator Module

This module adapts the segno encoder to the renderer's needs: it turns payload
bytes plus QR options into a ModuleMatrix. Version and mask selection are left
to segno; this module only enforces the requested version range.

Functions:
    make_qr: Generate a segno QR symbol within a version range
    encode: Encode payload bytes into a ModuleMatrix
    encode_text: Encode UTF-8 text into a ModuleMatrix
    decode_payload: Turn user text into payload bytes (utf8/latin1/base64)
"""

import base64
import binascii
import logging
from typing import Optional, Union

import segno

from .config import ConfigurationError, EccLevel, QrOptions
from .matrix import ModuleMatrix

logger = logging.getLogger(__name__)

MIN_VERSION = 1
MAX_VERSION = 40


def make_qr(
    data: Union[bytes, str],
    ecc: EccLevel = EccLevel.QUARTILE,
    min_version: int = MIN_VERSION,
    max_version: int = MAX_VERSION,
    mask: int = -1
) -> segno.QRCode:
    """
    Generate a QR code symbol with the smallest version in [min_version, max_version].

    Args:
        data (Union[bytes, str]): Payload; bytes are always encoded in byte mode
        ecc (EccLevel): Minimum error correction level. segno may boost it
            when the higher level fits in the same version
        min_version (int): Smallest allowed version (1-40)
        max_version (int): Largest allowed version (1-40)
        mask (int): Mask pattern 0-7, or -1 for automatic selection

    Returns:
        segno.QRCode: Generated QR code object

    Raises:
        ValueError: If the version range or mask is invalid
        segno.DataOverflowError: If data doesn't fit in max_version

    Example:
        >>> qr = make_qr(b"https://example.com", EccLevel.MEDIUM, min_version=5)
        >>> qr.version
        5
    """
    if not (MIN_VERSION <= min_version <= max_version <= MAX_VERSION):
        raise ValueError(f"Invalid version range [{min_version}, {max_version}]")
    if mask != -1 and not 0 <= mask <= 7:
        raise ValueError(f"Mask must be -1 (auto) or 0-7, got {mask}")

    mask_arg = None if mask == -1 else int(mask)
    mode = 'byte' if isinstance(data, (bytes, bytearray)) else None

    symbol = segno.make(
        data,
        error=ecc.value,
        version=None,
        mode=mode,
        mask=mask_arg,
        boost_error=True,
        micro=False
    )
    if symbol.version > max_version:
        raise segno.DataOverflowError(
            f"Data needs version {symbol.version}, above the maximum {max_version}"
        )
    if symbol.version < min_version:
        symbol = segno.make(
            data,
            error=ecc.value,
            version=min_version,
            mode=mode,
            mask=mask_arg,
            boost_error=True,
            micro=False
        )

    logger.debug(f"Encoded {len(data)} units as version {symbol.version} (error={symbol.error})")
    return symbol


def encode(
    payload: bytes,
    ecc: EccLevel = EccLevel.QUARTILE,
    min_version: int = MIN_VERSION,
    max_version: int = MAX_VERSION,
    mask: int = -1
) -> ModuleMatrix:
    """Encode payload bytes and return the symbol's module matrix (no quiet zone)."""
    symbol = make_qr(bytes(payload), ecc, min_version, max_version, mask)
    return ModuleMatrix.from_rows(symbol.matrix)


def encode_with_options(payload: bytes, options: Optional[QrOptions] = None) -> ModuleMatrix:
    options = options or QrOptions()
    return encode(payload, options.ecc, options.min_version, options.max_version, options.mask)


def encode_text(text: str, options: Optional[QrOptions] = None) -> ModuleMatrix:
    return encode_with_options(from_utf8(text), options)


def from_utf8(text: str) -> bytes:
    return text.encode('utf-8')


def from_latin1(text: str) -> bytes:
    return text.encode('latin-1')


def from_base64(text: str) -> bytes:
    return base64.b64decode(text.strip(), validate=True)


def decode_payload(text: str, encoding: str = 'utf8') -> bytes:
    """
    Convert user supplied text into payload bytes.

    Args:
        text (str): Raw input
        encoding (str): 'utf8', 'latin1' or 'base64' (case-insensitive)

    Raises:
        ConfigurationError: Unknown encoding, or text not representable in it
    """
    name = (encoding or 'utf8').strip().lower().replace('-', '')
    try:
        if name == 'utf8':
            return from_utf8(text)
        if name in ('latin1', 'iso88591'):
            return from_latin1(text)
        if name == 'base64':
            return from_base64(text)
    except (UnicodeEncodeError, binascii.Error) as ex:
        raise ConfigurationError(f"Payload is not valid {encoding}: {ex}") from ex
    raise ConfigurationError(f"Unknown encoding: {encoding}")
