"""Shared types for nearest_colour: RGBAColour and the HexQuery/ColourQuery variants."""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from nearest_colour.core.errors import ColourError, MissingChannelError

DEFAULT_ALPHA = 255

_RGB_CHANNELS = ('r', 'g', 'b')


@dataclass(frozen=True)
class RGBAColour:
    """An RGBA colour. Channels are conceptually 0-255 but never clamped.

    `a` is None when the alpha was not supplied; an explicit 0 is a real,
    fully transparent alpha. Channels must be integers (numpy integers are
    accepted and stored as int); floats, bools and strings raise ColourError.
    """

    r: int
    g: int
    b: int
    a: int | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None and f.name == 'a':
                continue
            if value is None:
                raise MissingChannelError(f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ColourError(f'Channel {f.name!r} must be an integer, got {value!r}')
            object.__setattr__(self, f.name, int(value))

    @property
    def is_complete(self) -> bool:
        return self.a is not None

    def with_alpha(self, default: int) -> RGBAColour:
        """Return a copy with alpha set to `default` if it was absent."""
        if self.a is not None:
            return self
        return replace(self, a=default)

    def as_tuple(self) -> tuple[int, int, int, int | None]:
        return (self.r, self.g, self.b, self.a)

    @classmethod
    def coerce(cls, value: Any) -> RGBAColour:
        """Build an RGBAColour from a colour, a mapping or a 3/4-item sequence.

        Mappings use the keys r, g, b and optionally a. Caller-owned input is
        copied, never kept or mutated. Channel types are checked by the
        constructor, so non-integral values raise ColourError.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            for channel in _RGB_CHANNELS:
                if value.get(channel) is None:
                    raise MissingChannelError(channel, 'mapping')
            return cls(value['r'], value['g'], value['b'], value.get('a'))
        if isinstance(value, (tuple, list)):
            if len(value) < 3:
                raise MissingChannelError(_RGB_CHANNELS[len(value)], 'sequence')
            if len(value) > 4:
                raise ColourError(f'Expected 3 or 4 channels, got {len(value)}')
            return cls(*value)
        raise TypeError(f'Cannot build RGBAColour from {type(value).__name__}')


@dataclass(frozen=True)
class HexQuery:
    """A nearest-colour query given as a hex string."""

    hex: str


@dataclass(frozen=True)
class ColourQuery:
    """A nearest-colour query given as a structured colour."""

    colour: RGBAColour


Query = HexQuery | ColourQuery


def as_query(value: Any) -> Query:
    """Wrap a raw query value in its variant. Existing variants pass through."""
    if isinstance(value, (HexQuery, ColourQuery)):
        return value
    if isinstance(value, str):
        return HexQuery(value)
    return ColourQuery(RGBAColour.coerce(value))
