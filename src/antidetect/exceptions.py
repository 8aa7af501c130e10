"""Exceptions raised by the engine."""


class AntiDetectError(Exception):
    """Base exception for engine errors."""
    pass


class InvalidInputError(AntiDetectError, TypeError):
    """Raised when a public entry point receives a non-text argument.

    This is the only error callers ever see; everything else is reported
    as data (scores, suggestions, low-confidence flags).
    """
    pass


class SpanIntegrityError(AntiDetectError):
    """Raised when a protected-span placeholder went missing during rewriting."""
    pass
