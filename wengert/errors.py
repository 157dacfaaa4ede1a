# wengert/errors.py
"""
Exception taxonomy.

Every error here signals misuse of the library (a programming error), not a
recoverable numeric condition. All of them are raised before the tape is
modified, so a failed operation leaves the tape exactly as it was.
"""


class WengertError(Exception):
    """Base class for all errors raised by wengert."""


class TapeMismatchError(WengertError, ValueError):
    """Two handles from different tapes were combined (or queried together)."""


class ZeroDivisorError(WengertError, ZeroDivisionError):
    """The divisor of a division or reciprocal has value exactly 0.0."""


class TapeOwnershipError(WengertError, RuntimeError):
    """A tape was written to from a thread other than the one that created it."""
