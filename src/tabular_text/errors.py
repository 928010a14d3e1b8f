"""Exceptions raised by the tabular_text package."""


class ParseError(Exception):
    """Raised when delimited text cannot be interpreted at all.

    Individual malformed records never raise; they are dropped by the parser.
    The underlying exception is always chained as ``__cause__``.
    """
