"""Hex color token parsing."""

import string

from .errors import InvalidColorTokenError

RGB = tuple[int, int, int]

_HEX_DIGITS = set(string.hexdigits)


def resolve_color(token: str) -> RGB:
    """Parse '#rrggbb', 'rrggbb', '#rgb' or 'rgb' into an RGB triple."""
    digits = token.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    if len(digits) not in (3, 6) or not set(digits) <= _HEX_DIGITS:
        raise InvalidColorTokenError(token)

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def to_hex(rgb: RGB) -> str:
    """Format an RGB triple as '#rrggbb'."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)
