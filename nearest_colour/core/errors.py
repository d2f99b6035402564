"""Exceptions raised by nearest_colour.

Parse failures and empty-palette queries are reported by returning None, not
by raising. The classes below cover misuse that has no meaningful result.
"""


class ColourError(ValueError):
    """Base class for all nearest_colour errors."""


class MissingChannelError(ColourError):
    """A required r/g/b/a channel was not supplied."""

    def __init__(self, channel: str, where: str = 'colour'):
        self.channel = channel
        super().__init__(f'Missing channel {channel!r} in {where}')


class IncompleteColourError(ColourError):
    """A structured query colour has no alpha channel."""


class ConfigError(ColourError):
    """Configured default alpha is not an integer in [0, 255]."""
