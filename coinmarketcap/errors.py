"""CoinMarketCap client error classes."""

from typing import Any, Optional

import requests


# Network-level failures are re-raised untouched, so callers catch the
# transport's own exception type.
TransportError = requests.exceptions.RequestException


class CoinMarketCapError(Exception):
    """Base exception for all CoinMarketCap client errors."""
    pass


class InvalidArgumentError(CoinMarketCapError, ValueError):
    """Raised when an endpoint is called with unusable arguments.

    Always raised before any request is built.
    """
    pass


class OutOfRangeError(InvalidArgumentError):
    """Raised when a numeric parameter falls outside its valid bound."""

    def __init__(self, name: str, value: Any, bound: str):
        self.name = name
        self.value = value
        self.bound = bound
        super().__init__(f"{name} must be {bound} (got {value!r}).")


class DecodeError(CoinMarketCapError):
    """Raised when a response body is not valid JSON for the requested shape."""

    def __init__(self, message: str, status_code: Optional[int] = None, text: Optional[str] = None):
        self.status_code = status_code
        self.text = text
        super().__init__(message)
