class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a field value violates domain rules."""


class ParseError(DomainError):
    """Raised when console input cannot be converted to the expected type."""


class InputAbortedError(DomainError):
    """Raised when the console stops supplying usable input (EOF or too many attempts)."""
