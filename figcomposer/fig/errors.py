"""Exceptions raised by the figure model."""


class FigError(Exception):
    """Base class for figure model errors."""
    pass


class ExpressionError(FigError):
    """Base class for function expression errors."""
    pass


class ParseError(ExpressionError):
    """Failed to parse a function expression."""
    pass


class ValidationError(ExpressionError):
    """Function expression contains disallowed constructs or names."""
    pass
