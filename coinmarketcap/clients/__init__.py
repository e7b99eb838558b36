"""Endpoint clients."""

from .cryptocurrency_client import CryptocurrencyClient

__all__ = [
    "CryptocurrencyClient",
]
