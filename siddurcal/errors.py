class SiddurCalError(Exception):
    """Base error."""

class InputInvalidError(SiddurCalError, ValueError):
    """Raised when a caller passes a malformed date, location or setting."""

class CatalogError(SiddurCalError):
    """Raised when static siddur catalog data does not match its schema."""

class CalendarArithmeticError(SiddurCalError):
    """Raised when Hebrew calendar arithmetic yields an impossible year length."""
