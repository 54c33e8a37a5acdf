"""Hex color parsing."""

import string

from .errors import InvalidColor


def hex_to_rgb(hex_string):
    """Return the (r, g, b) integers of a hex color.

    Accepts "rrggbb" or the shorthand "rgb", with or without a leading '#'.
    """
    digits = hex_string.strip().lstrip('#')
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)

    if len(digits) != 6 or any(ch not in string.hexdigits for ch in digits):
        raise InvalidColor(f"not a hex color: {hex_string!r}")

    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb):
    """Return '#rrggbb' for an (r, g, b) tuple of 0-255 integers."""
    return '#' + ''.join(f"{int(c):02x}" for c in rgb)
