"""Exception hierarchy raised by the open_exchange_rates client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from open_exchange_rates.models import ErrorMessage


class OpenExchangeRatesError(Exception):
    """Base class for every error raised by this package."""


class EmptyAPIKeyError(OpenExchangeRatesError, ValueError):
    """Raised when a client is constructed without an API key."""

    def __init__(self, message: str = "API Key empty.") -> None:
        super().__init__(message)


class APIErrorException(OpenExchangeRatesError):
    """An error response returned by the Open Exchange Rates API.

    The decoded error body is available as :attr:`error_message` so callers
    can branch on ``status`` or ``message`` (for example ``invalid_app_id`` or
    ``not_allowed``).
    """

    def __init__(self, error_message: "ErrorMessage | None", message: str = "") -> None:
        super().__init__(message or (str(error_message) if error_message is not None else ""))
        self.error_message = error_message


class UnexpectedStatusError(OpenExchangeRatesError):
    """Raised for HTTP status codes the API is not documented to return."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected HTTP Status code: {status_code}")
        self.status_code = status_code


class DecodeError(OpenExchangeRatesError, ValueError):
    """Raised when a response body is not valid JSON of the expected shape."""


class TransportError(OpenExchangeRatesError):
    """Raised when the HTTP request itself could not be completed."""


class MissingRateError(OpenExchangeRatesError, LookupError):
    """Raised when a conversion needs a rate the table does not hold."""


__all__ = [
    "OpenExchangeRatesError",
    "EmptyAPIKeyError",
    "APIErrorException",
    "UnexpectedStatusError",
    "DecodeError",
    "TransportError",
    "MissingRateError",
]
