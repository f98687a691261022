"""
Exception hierarchy for string values.

Each failure kind has its own class so that callers can select on the kind of
failure in an `except` clause. All of them derive from the builtin exception
that best describes them, so generic handlers (`except IndexError`, etc.) keep
working.
"""


class StringValueError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgument(StringValueError, ValueError):
    """
    Structurally invalid option, or a value without a textual representation.
    """


class OutOfBounds(StringValueError, IndexError):
    """Indexed read outside the valid (positive or negative) index range."""

    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(f'No character exists at index {index} for string of '
                         f'length {length}.')


class ImmutableViolation(StringValueError, TypeError):
    """Attempt to write through an indexing or assignment path."""

    def __init__(self, kls, action='modify'):
        name = kls if isinstance(kls, str) else kls.__name__
        super().__init__(f'{name} object is immutable, cannot {action} it.')


class UnsupportedEncoding(StringValueError, LookupError):
    """The requested text encoding cannot be used for this operation."""
