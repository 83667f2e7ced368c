"""Exceptions raised by chatlib."""


class ChatlibError(Exception):
    """Base class for chatlib errors."""


class FormatError(ChatlibError, ValueError):
    """A chat transcript does not start with the human label."""


class InvariantError(ChatlibError, AssertionError):
    """An internal precondition was violated."""
