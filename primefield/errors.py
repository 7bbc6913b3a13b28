class FieldError(Exception):
    """Base class for all finite field errors."""


class RangeViolation(FieldError, ValueError):
    """Raised when a number is outside of the field range [0, prime)."""


class FieldMismatch(FieldError, TypeError):
    """Raised when a binary operation mixes elements from different fields."""


class FieldDivisionByZero(FieldError, ZeroDivisionError):
    """Raised on division by zero, inverse of zero or a negative power of zero."""
