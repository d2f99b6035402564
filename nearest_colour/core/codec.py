"""Hex <-> RGBA conversion and RGBA Euclidean distance.

Accepted hex forms (leading '#' optional, any case):
  rgb       shorthand, each digit doubled, alpha defaulted
  rrggbb    alpha defaulted
  rrggbbaa  explicit alpha, '00' is kept as 0

Anything else parses to None. Serialisation always emits lowercase.
"""

import numpy as np

from nearest_colour.core.errors import IncompleteColourError, MissingChannelError
from nearest_colour.core.types import DEFAULT_ALPHA, RGBAColour

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def hex_to_rgba(hex_str: str | None, default_alpha: int = DEFAULT_ALPHA) -> RGBAColour | None:
    """Parse a hex colour string. Returns None for empty or malformed input."""
    if not hex_str:
        return None
    digits = hex_str[1:] if hex_str.startswith('#') else hex_str
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    if len(digits) not in (6, 8) or not set(digits) <= _HEX_DIGITS:
        return None

    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    a = int(digits[6:8], 16) if len(digits) == 8 else default_alpha
    return RGBAColour(r, g, b, a)


def rgba_to_hex(r: int | None, g: int | None, b: int | None, a: int | None) -> str:
    """Serialise channels to '#rrggbbaa'. Alpha is always emitted.

    Raises MissingChannelError if any channel is None.
    """
    channels = {'r': r, 'g': g, 'b': b, 'a': a}
    for name, value in channels.items():
        if value is None:
            raise MissingChannelError(name, 'rgba_to_hex')
    return '#' + ''.join(f'{value:02x}' for value in channels.values())


def to_hex(colour: RGBAColour, strip_opaque: bool = True) -> str:
    """Serialise a colour, dropping the alpha pair when it is exactly 255."""
    hex_str = rgba_to_hex(colour.r, colour.g, colour.b, colour.a)
    if strip_opaque and colour.a == 255:
        return hex_str[:-2]
    return hex_str


def rgba_distance(c1: RGBAColour, c2: RGBAColour) -> float:
    """Euclidean distance in (r, g, b, a) space. Both colours must be complete."""
    for colour in (c1, c2):
        if not colour.is_complete:
            raise IncompleteColourError(f'Colour {colour} has no alpha channel')
    # int64, not uint8: (0 - 200) must not wrap
    diff = np.array(c1.as_tuple(), dtype=np.int64) - np.array(c2.as_tuple(), dtype=np.int64)
    return float(np.sqrt(np.dot(diff, diff)))
