"""Exception types shared across the package."""


class UnoError(Exception):
    """Base class for all unotable errors."""


class EmptyPileError(UnoError):
    """The discard pile was queried before any card was placed."""


class InvalidMoveError(UnoError):
    """A strategy returned a move that is not legal for its hand."""


class StatsError(UnoError):
    """The statistics store could not be read or written."""


class ConfigError(UnoError):
    """An environment setting has an unusable value."""
