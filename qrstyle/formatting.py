# -*- coding: utf-8 -*-
"""
SVG number and attribute formatting.

Whole numbers are written as integers, everything else with two decimals.
"""

from xml.sax.saxutils import escape

__all__ = ['fmt', 'fmt_pct', 'escape_text', 'escape_attr']


def fmt(value: float) -> str:
    """
    Format a coordinate compactly.

    Example:
        >>> fmt(200.0), fmt(9.523809), fmt(-0.5)
        ('200', '9.52', '-0.50')
    """
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def fmt_pct(value: float) -> str:
    """Gradient stop offset (0-1) as a percentage, e.g. 0.5 -> '50.00%'."""
    return f"{value * 100.0:.2f}%"


def escape_text(text: str) -> str:
    return escape(text)


def escape_attr(value: str) -> str:
    """Escape a value placed inside a double-quoted attribute."""
    return escape(value, {'"': '&quot;'})
