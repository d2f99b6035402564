"""nearest_colour — hex/RGBA conversion and nearest-colour palette lookup."""

from nearest_colour.core.codec import hex_to_rgba, rgba_distance, rgba_to_hex, to_hex
from nearest_colour.core.errors import ColourError, ConfigError, IncompleteColourError, MissingChannelError
from nearest_colour.core.types import DEFAULT_ALPHA, ColourQuery, HexQuery, RGBAColour, as_query
from nearest_colour.matcher import NearestColour

__all__ = [
    'DEFAULT_ALPHA',
    'ColourError',
    'ColourQuery',
    'ConfigError',
    'HexQuery',
    'IncompleteColourError',
    'MissingChannelError',
    'NearestColour',
    'RGBAColour',
    'as_query',
    'hex_to_rgba',
    'rgba_distance',
    'rgba_to_hex',
    'to_hex',
]
