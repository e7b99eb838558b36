"""Typed client for the CoinMarketCap cryptocurrency REST API."""

from .base import ApiClientBase
from .clients import CryptocurrencyClient
from .config import ClientSettings, PRODUCTION_BASE_URL, SANDBOX_BASE_URL
from .executor import RawResponse, RequestExecutor, ResponseOrigin
from .models import ApiResponse, ApiResponseList, ApiResponseMap, Status
from .errors import (
    CoinMarketCapError,
    DecodeError,
    InvalidArgumentError,
    OutOfRangeError,
    TransportError,
)

__all__ = [
    "ApiClientBase",
    "CryptocurrencyClient",
    "ClientSettings",
    "PRODUCTION_BASE_URL",
    "SANDBOX_BASE_URL",
    "RawResponse",
    "RequestExecutor",
    "ResponseOrigin",
    "ApiResponse",
    "ApiResponseList",
    "ApiResponseMap",
    "Status",
    "CoinMarketCapError",
    "DecodeError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "TransportError",
]
