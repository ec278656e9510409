"""Exceptions raised by the c30 codec.

Every codec failure is a C30Error. They subclass ValueError because they
describe bad input data, the same way a bad base32 character does. I/O
failures are not wrapped: OSError from the underlying streams propagates
as-is.
"""


class C30Error(ValueError):
    pass


class InvalidCharacterError(C30Error):
    """A non-line-break character outside the 30-symbol alphabet."""


class UnexpectedEndError(C30Error):
    """Input ended in the middle of a remainder/quotient pair."""


class ByteOverflowError(C30Error):
    """A pair of valid symbols whose value does not fit in one byte."""
