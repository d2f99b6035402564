"""Nearest-colour lookup against a user-supplied RGBA palette.

Build a palette from hex strings and/or RGBA values, then query it with a
hex string or a colour. Distance is Euclidean in (r, g, b, a) space. When two
entries are equally close, the one added first wins.

Example:
    nc = NearestColour().from_hex(['#ff0000', '#ff00ff', '#0f0'])
    nc.from_rgba([{'r': 255, 'g': 255, 'b': 0}])
    nc.nearest('#ff00aa', as_hex=True)  # '#ff00ff'

Not safe for concurrent mutation: serialise from_* calls and queries
externally if a matcher is shared between threads.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np

from nearest_colour.core.codec import hex_to_rgba, to_hex
from nearest_colour.core.errors import ConfigError, IncompleteColourError
from nearest_colour.core.types import DEFAULT_ALPHA, HexQuery, RGBAColour, as_query

logger = logging.getLogger(__name__)


class NearestColour:
    """An append-only RGBA palette with nearest-match queries.

    Every stored entry is complete: colours added without alpha get
    `default_alpha` at insertion time.
    """

    def __init__(self, default_alpha: int = DEFAULT_ALPHA):
        if isinstance(default_alpha, bool) or not isinstance(default_alpha, int) or not 0 <= default_alpha <= 255:
            raise ConfigError(f'Default alpha must be an integer within 0-255, got {default_alpha!r}')
        self.default_alpha = default_alpha
        self._palette: list[RGBAColour] = []
        self._array: np.ndarray | None = None

    @property
    def palette(self) -> tuple[RGBAColour, ...]:
        return tuple(self._palette)

    def __len__(self) -> int:
        return len(self._palette)

    def __iter__(self) -> Iterator[RGBAColour]:
        return iter(tuple(self._palette))

    def __repr__(self) -> str:
        return f'NearestColour(default_alpha={self.default_alpha}, palette={self._palette!r})'

    def from_rgba(self, entries: Iterable[Any]) -> NearestColour:
        """Append colours given as RGBAColour, mappings or 3/4-item sequences.

        Missing alpha is filled with default_alpha; an explicit 0 is kept.
        Inputs are copied, never mutated. If any entry is invalid nothing is
        appended and the error propagates.
        """
        colours = [RGBAColour.coerce(entry).with_alpha(self.default_alpha) for entry in entries]
        self._extend(colours)
        return self

    def from_hex(self, hex_strings: Iterable[str]) -> NearestColour:
        """Append colours parsed from hex strings. Unparseable strings are skipped."""
        colours = []
        for hex_str in hex_strings:
            colour = hex_to_rgba(hex_str, self.default_alpha)
            if colour is None:
                logger.debug('Skipping unparseable hex colour %r', hex_str)
                continue
            colours.append(colour)
        self._extend(colours)
        return self

    def nearest(
        self,
        query: Any,
        as_hex: bool = False,
        max_distance: float | None = None,
    ) -> RGBAColour | str | None:
        """Return the palette entry closest to `query`.

        `query` is a hex string, an RGBAColour (alpha required), a mapping,
        a sequence, or a HexQuery/ColourQuery. Returns None if the hex does
        not parse, the palette is empty, or the best match is farther than
        `max_distance`. With as_hex=True the match is returned as a hex
        string, without the alpha pair when alpha is 255.
        """
        match, distance = self.nearest_with_distance(query)
        if match is None:
            return None
        if max_distance is not None and distance > max_distance:
            return None
        return to_hex(match) if as_hex else match

    def nearest_with_distance(self, query: Any) -> tuple[RGBAColour | None, float]:
        """Like nearest(), but return (match, distance). No match gives (None, inf)."""
        target = self._resolve(query)
        if target is None:
            return None, math.inf
        if not self._palette:
            logger.debug('Nearest-colour query against an empty palette')
            return None, math.inf

        diff = self._as_array() - np.array(target.as_tuple(), dtype=np.int64)
        squared = np.einsum('ij,ij->i', diff, diff)
        # argmin returns the first minimum, so earlier entries win ties
        index = int(np.argmin(squared))
        return self._palette[index], float(np.sqrt(squared[index]))

    def _resolve(self, query: Any) -> RGBAColour | None:
        variant = as_query(query)
        if isinstance(variant, HexQuery):
            colour = hex_to_rgba(variant.hex, self.default_alpha)
            if colour is None:
                logger.debug('Unparseable hex query %r', variant.hex)
            return colour
        if not variant.colour.is_complete:
            raise IncompleteColourError(f'Query colour {variant.colour} has no alpha channel')
        return variant.colour

    def _extend(self, colours: list[RGBAColour]) -> None:
        if colours:
            self._palette.extend(colours)
            self._array = None

    def _as_array(self) -> np.ndarray:
        if self._array is None:
            self._array = np.array([c.as_tuple() for c in self._palette], dtype=np.int64).reshape(-1, 4)
        return self._array
