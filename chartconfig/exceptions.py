"""Error taxonomy for the chartconfig package.

Domain violations subclass `ValueError` so callers that already guard
conversions with `except ValueError` keep working.
"""

from __future__ import annotations


class ChartConfigError(Exception):
    """Base exception for all chartconfig errors."""


class ConfigurationError(ChartConfigError):
    """Raised when an environment setting holds an unsupported value."""


class StyleDomainError(ChartConfigError, ValueError):
    """Raised when a style token is outside its enumerated domain."""

    def __init__(self, *, domain: str, value: object, allowed: tuple[str, ...]) -> None:
        """Initialize the error.

        Args:
            domain: Name of the enumerated style domain.
            value: Rejected input value.
            allowed: Tokens accepted by the domain.
        """

        super().__init__(f"{value!r} is not a valid {domain}; expected one of {', '.join(allowed)}.")
        self.domain = domain
        self.value = value
        self.allowed = allowed


class ColorError(ChartConfigError, ValueError):
    """Raised when a color cannot be constructed or parsed."""


class UnknownFieldError(ChartConfigError, ValueError):
    """Raised when a field name is not declared on a dataset kind."""


class DatasetDecodeError(ChartConfigError, ValueError):
    """Raised when a stored payload cannot be decoded into a dataset."""


class FieldValueError(ChartConfigError, ValueError):
    """Raised when a sequence element is missing where the field forbids gaps."""
