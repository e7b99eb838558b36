"""Data models for CoinMarketCap API responses."""

from dataclasses import dataclass, fields
from functools import partial
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


def _require_object(data: Any, type_name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{type_name} expects a JSON object, got {type(data).__name__}")
    return data


def _map_of(item_type) -> Callable[[Any], Optional[Dict[str, Any]]]:
    def convert(raw):
        if raw is None:
            return None
        return {key: item_type.from_dict(value) for key, value in _require_object(raw, "map").items()}
    return convert


def _list_of(item_type) -> Callable[[Any], Optional[List[Any]]]:
    def convert(raw):
        if raw is None:
            return None
        if not isinstance(raw, list):
            raise TypeError(f"expected a JSON array, got {type(raw).__name__}")
        return [item_type.from_dict(value) for value in raw]
    return convert


def _optional(item_type) -> Callable[[Any], Any]:
    return lambda raw: None if raw is None else item_type.from_dict(raw)


class Record:
    """Mixin building a dataclass from a JSON object.

    Keys matching a field are assigned (through the converter listed in
    `_nested`, if any); every other key lands in `extra`.
    """

    _nested: Dict[str, Callable[[Any], Any]] = {}

    @classmethod
    def from_dict(cls, data: Any):
        data = _require_object(data, cls.__name__)
        names = {f.name for f in fields(cls)} - {"extra"}
        known = {}
        extra = {}
        for key, value in data.items():
            if key in names:
                converter = cls._nested.get(key)
                known[key] = converter(value) if converter else value
            else:
                extra[key] = value
        return cls(**known, extra=extra or None)


@dataclass
class Status(Record):
    """Status block present in every response, including API-level errors."""
    timestamp: Optional[str] = None
    error_code: Optional[int] = None
    error_message: Optional[str] = None
    elapsed: Optional[int] = None
    credit_count: Optional[int] = None
    notice: Optional[str] = None
    extra: Optional[Dict[str, Any]] = None

    @property
    def is_error(self) -> bool:
        return bool(self.error_code)


@dataclass
class ApiResponse(Generic[T]):
    """Envelope holding a single data object."""
    status: Status
    data: Optional[T] = None

    @staticmethod
    def _decode_data(raw: Any, item_type) -> Any:
        return _optional(item_type)(raw)

    @classmethod
    def from_dict(cls, payload: Any, item_type) -> "ApiResponse":
        payload = _require_object(payload, cls.__name__)
        return cls(
            status=Status.from_dict(payload.get("status") or {}),
            data=cls._decode_data(payload.get("data"), item_type),
        )

    @classmethod
    def decoder(cls, item_type) -> Callable[[Any], "ApiResponse"]:
        """Return a callable decoding parsed JSON into this envelope of item_type."""
        return partial(cls.from_dict, item_type=item_type)

    @property
    def is_error(self) -> bool:
        return self.status.is_error


@dataclass
class ApiResponseList(ApiResponse[List[T]]):
    """Envelope holding an array of data objects."""

    @staticmethod
    def _decode_data(raw: Any, item_type) -> Any:
        return _list_of(item_type)(raw)


@dataclass
class ApiResponseMap(ApiResponse[Dict[str, T]]):
    """Envelope holding data objects keyed by the identifier used in the request
    (ID, slug, or symbol)."""

    @staticmethod
    def _decode_data(raw: Any, item_type) -> Any:
        return _map_of(item_type)(raw)


@dataclass
class Platform(Record):
    """Parent chain of a token."""
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    slug: Optional[str] = None
    token_address: Optional[str] = None
    extra: Optional[Dict[str, Any]] = None


@dataclass
class Quote(Record):
    """Market quote in one convert currency."""
    price: Optional[float] = None
    volume_24h: Optional[float] = None
    volume_change_24h: Optional[float] = None
    percent_change_1h: Optional[float] = None
    percent_change_24h: Optional[float] = None
    percent_change_7d: Optional[float] = None
    percent_change_30d: Optional[float] = None
    market_cap: Optional[float] = None
    market_cap_dominance: Optional[float] = None
    fully_diluted_market_cap: Optional[float] = None
    last_updated: Optional[str] = None
    extra: Optional[Dict[str, Any]] = None


@dataclass
class CryptocurrencyIdMapping(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    slug: Optional[str] = None
    rank: Optional[int] = None
    is_active: Optional[int] = None
    first_historical_data: Optional[str] = None
    last_historical_data: Optional[str] = None
    platform: Optional[Platform] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"platform": _optional(Platform)}


@dataclass
class CryptocurrencyMetadata(Record):
    """Static metadata: logo, description, links, tags."""
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    slug: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    logo: Optional[str] = None
    subreddit: Optional[str] = None
    notice: Optional[str] = None
    tags: Optional[List[str]] = None
    urls: Optional[Dict[str, List[str]]] = None
    date_added: Optional[str] = None
    date_launched: Optional[str] = None
    platform: Optional[Platform] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"platform": _optional(Platform)}


@dataclass
class Cryptocurrency(Record):
    """Cryptocurrency with market data, as returned by listings and quotes."""
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    slug: Optional[str] = None
    cmc_rank: Optional[int] = None
    num_market_pairs: Optional[int] = None
    circulating_supply: Optional[float] = None
    total_supply: Optional[float] = None
    max_supply: Optional[float] = None
    date_added: Optional[str] = None
    last_updated: Optional[str] = None
    tags: Optional[List[str]] = None
    platform: Optional[Platform] = None
    # Keyed by convert currency (e.g. "USD")
    quote: Optional[Dict[str, Quote]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"platform": _optional(Platform), "quote": _map_of(Quote)}


@dataclass
class HistoricalQuote(Record):
    timestamp: Optional[str] = None
    quote: Optional[Dict[str, Quote]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"quote": _map_of(Quote)}


@dataclass
class CryptocurrencyHistoricalData(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    is_active: Optional[int] = None
    is_fiat: Optional[int] = None
    quotes: Optional[List[HistoricalQuote]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"quotes": _list_of(HistoricalQuote)}


@dataclass
class MarketPairExchange(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    extra: Optional[Dict[str, Any]] = None


@dataclass
class MarketPair(Record):
    """One trading pair on one exchange."""
    market_id: Optional[int] = None
    market_pair: Optional[str] = None
    category: Optional[str] = None
    fee_type: Optional[str] = None
    exchange: Optional[MarketPairExchange] = None
    market_pair_base: Optional[Dict[str, Any]] = None
    market_pair_quote: Optional[Dict[str, Any]] = None
    # Market pair quotes mix "exchange_reported" with convert currencies,
    # so they are kept as raw objects.
    quote: Optional[Dict[str, Dict[str, Any]]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"exchange": _optional(MarketPairExchange)}


@dataclass
class CryptocurrencyMarketPairs(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    num_market_pairs: Optional[int] = None
    market_pairs: Optional[List[MarketPair]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"market_pairs": _list_of(MarketPair)}


@dataclass
class OhlcvQuote(Record):
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[float] = None
    market_cap: Optional[float] = None
    timestamp: Optional[str] = None
    last_updated: Optional[str] = None
    extra: Optional[Dict[str, Any]] = None


@dataclass
class CryptocurrencyOhlcvQuotes(Record):
    """Latest (current UTC day, so far) OHLCV for one cryptocurrency."""
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    last_updated: Optional[str] = None
    time_open: Optional[str] = None
    time_close: Optional[str] = None
    time_high: Optional[str] = None
    time_low: Optional[str] = None
    quote: Optional[Dict[str, OhlcvQuote]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"quote": _map_of(OhlcvQuote)}


@dataclass
class OhlcvHistoricalQuote(Record):
    time_open: Optional[str] = None
    time_close: Optional[str] = None
    time_high: Optional[str] = None
    time_low: Optional[str] = None
    quote: Optional[Dict[str, OhlcvQuote]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"quote": _map_of(OhlcvQuote)}


@dataclass
class CryptocurrencyOhlcvHistorical(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    quotes: Optional[List[OhlcvHistoricalQuote]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"quotes": _list_of(OhlcvHistoricalQuote)}


@dataclass
class PerformancePeriod(Record):
    open_timestamp: Optional[str] = None
    high_timestamp: Optional[str] = None
    low_timestamp: Optional[str] = None
    close_timestamp: Optional[str] = None
    quote: Optional[Dict[str, Dict[str, Any]]] = None
    extra: Optional[Dict[str, Any]] = None


@dataclass
class CryptocurrencyPricePerformanceStats(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    slug: Optional[str] = None
    last_updated: Optional[str] = None
    # Keyed by time period (e.g. "all_time", "24h")
    periods: Optional[Dict[str, PerformancePeriod]] = None
    extra: Optional[Dict[str, Any]] = None

    _nested = {"periods": _map_of(PerformancePeriod)}
