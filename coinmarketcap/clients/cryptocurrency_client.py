"""Client for the /v1/cryptocurrency endpoints of the CoinMarketCap API."""

import datetime
from typing import Optional, Union

from ..base import ApiClientBase
from ..enums import (
    CryptocurrencyType,
    Interval,
    IntervalOhlcvHistorical,
    SortCryptocurrencyListingsHistorical,
    SortCryptocurrencyListingsLatest,
    SortCryptocurrencyMap,
    SortCryptocurrencyMarketPairsLatest,
    SortDir,
    TimePeriodOhlcvHistorical,
    TimePeriodPricePerformanceStats,
    describe,
)
from ..errors import InvalidArgumentError
from ..models import (
    ApiResponse,
    ApiResponseList,
    ApiResponseMap,
    Cryptocurrency,
    CryptocurrencyHistoricalData,
    CryptocurrencyIdMapping,
    CryptocurrencyMarketPairs,
    CryptocurrencyMetadata,
    CryptocurrencyOhlcvHistorical,
    CryptocurrencyOhlcvQuotes,
    CryptocurrencyPricePerformanceStats,
)
from ..utils.validation import (
    check_min,
    check_range,
    format_bool_flag,
    format_date,
    format_number,
    require_one_of,
)


DateLike = Union[datetime.date, datetime.datetime, str]

MAX_LIMIT = 5000
MAX_FILTER_VALUE = 10 ** 17
MIN_PERCENT_CHANGE = -100


def _check_pagination(start: Optional[int], limit: Optional[int]) -> None:
    check_min("start", start, 1)
    check_range("limit", limit, 1, MAX_LIMIT)


class CryptocurrencyClient(ApiClientBase):
    """Client for CoinMarketCap cryptocurrency market data.

    Every method performs exactly one request and returns the decoded
    envelope, or None if the API answered with an empty body. API-level
    errors (bad key, plan limits, unknown symbols) come back as an envelope
    whose `status.error_code` is non-zero; check `response.is_error`.

    Endpoints that look a cryptocurrency up accept any of `id`, `slug`, or
    `symbol` (each may be a comma-separated list), and at least one must be
    given.

    Reference: https://coinmarketcap.com/api/documentation/v1/
    """

    def map(
        self,
        listing_status: Optional[str] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[SortCryptocurrencyMap] = None,
        symbol: Optional[str] = None,
        aux: Optional[str] = None
    ) -> Optional[ApiResponseList[CryptocurrencyIdMapping]]:
        """Map all cryptocurrencies to unique CoinMarketCap IDs.

        Args:
            listing_status: "active" (API default), "inactive", "untracked", or a
                            comma-separated combination.
            start: 1-based offset into the list.
            limit: Number of results, 1..5000.
            sort: Field to sort by.
            symbol: Comma-separated symbols to restrict the mapping to.
            aux: Comma-separated supplemental fields.

        Raises:
            OutOfRangeError: If start or limit is out of bounds.
        """
        _check_pagination(start, limit)

        return self._request("cryptocurrency/map", {
            "listing_status": listing_status,
            "start": format_number(start),
            "limit": format_number(limit),
            "sort": describe(sort),
            "symbol": symbol,
            "aux": aux,
        }, ApiResponseList.decoder(CryptocurrencyIdMapping))

    def metadata(
        self,
        id: Optional[str] = None,
        slug: Optional[str] = None,
        symbol: Optional[str] = None,
        aux: Optional[str] = None
    ) -> Optional[ApiResponseMap[CryptocurrencyMetadata]]:
        """Static metadata (logo, description, website and social links).

        Returns:
            Map of metadata keyed by the identifier type used in the request.

        Raises:
            InvalidArgumentError: If none of id, slug, or symbol is given.
        """
        require_one_of(id=id, slug=slug, symbol=symbol)

        return self._request("cryptocurrency/info", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "aux": aux,
        }, ApiResponseMap.decoder(CryptocurrencyMetadata))

    def listings_latest(
        self,
        start: Optional[int] = 1,
        limit: Optional[int] = MAX_LIMIT,
        price_min: Optional[float] = None,
        price_max: Optional[float] = None,
        market_cap_min: Optional[float] = None,
        market_cap_max: Optional[float] = None,
        volume_24h_min: Optional[float] = None,
        volume_24h_max: Optional[float] = None,
        circulating_supply_min: Optional[float] = None,
        circulating_supply_max: Optional[float] = None,
        percent_change_24h_min: Optional[float] = None,
        percent_change_24h_max: Optional[float] = None,
        convert: Optional[str] = None,
        convert_id: Optional[str] = None,
        sort: Optional[SortCryptocurrencyListingsLatest] = None,
        sort_dir: Optional[SortDir] = None,
        cryptocurrency_type: Optional[CryptocurrencyType] = None,
        aux: Optional[str] = None
    ) -> Optional[ApiResponseList[Cryptocurrency]]:
        """Paginated list of active cryptocurrencies with latest market data.

        Args:
            start: 1-based offset into the list (default: 1).
            limit: Number of results, 1..5000 (default: 5000).
            price_min, price_max: USD price filter, 0..10^17.
            market_cap_min, market_cap_max: Market cap filter, 0..10^17.
            volume_24h_min, volume_24h_max: 24 hour USD volume filter, 0..10^17.
            circulating_supply_min, circulating_supply_max: Supply filter, 0..10^17.
            percent_change_24h_min, percent_change_24h_max: 24 hour change filter, >= -100.
            convert: Comma-separated currency symbols to quote in.
            convert_id: Same as convert, by CoinMarketCap ID. Not combinable with convert.
            sort: Field to sort by (API default: market_cap).
            sort_dir: Sort direction.
            cryptocurrency_type: "all", "coins", or "tokens".
            aux: Comma-separated supplemental fields.

        Raises:
            OutOfRangeError: If any numeric parameter is out of bounds.
        """
        _check_pagination(start, limit)
        for name, value in (
            ("price_min", price_min),
            ("price_max", price_max),
            ("market_cap_min", market_cap_min),
            ("market_cap_max", market_cap_max),
            ("volume_24h_min", volume_24h_min),
            ("volume_24h_max", volume_24h_max),
            ("circulating_supply_min", circulating_supply_min),
            ("circulating_supply_max", circulating_supply_max),
        ):
            check_range(name, value, 0, MAX_FILTER_VALUE)
        check_min("percent_change_24h_min", percent_change_24h_min, MIN_PERCENT_CHANGE)
        check_min("percent_change_24h_max", percent_change_24h_max, MIN_PERCENT_CHANGE)

        return self._request("cryptocurrency/listings/latest", {
            "start": format_number(start),
            "limit": format_number(limit),
            "price_min": format_number(price_min),
            "price_max": format_number(price_max),
            "market_cap_min": format_number(market_cap_min),
            "market_cap_max": format_number(market_cap_max),
            "volume_24h_min": format_number(volume_24h_min),
            "volume_24h_max": format_number(volume_24h_max),
            "circulating_supply_min": format_number(circulating_supply_min),
            "circulating_supply_max": format_number(circulating_supply_max),
            "percent_change_24h_min": format_number(percent_change_24h_min),
            "percent_change_24h_max": format_number(percent_change_24h_max),
            "convert": convert,
            "convert_id": convert_id,
            "sort": describe(sort),
            "sort_dir": describe(sort_dir),
            "cryptocurrency_type": describe(cryptocurrency_type),
            "aux": aux,
        }, ApiResponseList.decoder(Cryptocurrency))

    def listings_historical(
        self,
        date: DateLike,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        convert: Optional[str] = None,
        convert_id: Optional[str] = None,
        sort: Optional[SortCryptocurrencyListingsHistorical] = None,
        sort_dir: Optional[SortDir] = None,
        cryptocurrency_type: Optional[CryptocurrencyType] = None,
        aux: Optional[str] = None
    ) -> Optional[ApiResponseList[Cryptocurrency]]:
        """Ranked and sorted list of all cryptocurrencies for a historical UTC date.

        Args:
            date: Day of the snapshot.

        Raises:
            InvalidArgumentError: If date is missing.
            OutOfRangeError: If start or limit is out of bounds.
        """
        if date is None or not str(date).strip():
            raise InvalidArgumentError("date is required")
        _check_pagination(start, limit)

        return self._request("cryptocurrency/listings/historical", {
            "date": format_date(date),
            "start": format_number(start),
            "limit": format_number(limit),
            "convert": convert,
            "convert_id": convert_id,
            "sort": describe(sort),
            "sort_dir": describe(sort_dir),
            "cryptocurrency_type": describe(cryptocurrency_type),
            "aux": aux,
        }, ApiResponseList.decoder(Cryptocurrency))

    def quotes_latest(
        self,
        id: Optional[str] = None,
        slug: Optional[str] = None,
        symbol: Optional[str] = None,
        convert: Optional[str] = None,
        convert_id: Optional[str] = None,
        aux: Optional[str] = None,
        skip_invalid: bool = False
    ) -> Optional[ApiResponseMap[Cryptocurrency]]:
        """Latest market quote for one or more cryptocurrencies.

        Args:
            skip_invalid: Let the request succeed even if some identifiers are invalid.

        Returns:
            Map of cryptocurrencies keyed by the identifier type used in the request.

        Raises:
            InvalidArgumentError: If none of id, slug, or symbol is given.
        """
        require_one_of(id=id, slug=slug, symbol=symbol)

        return self._request("cryptocurrency/quotes/latest", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "convert": convert,
            "convert_id": convert_id,
            "aux": aux,
            "skip_invalid": format_bool_flag(skip_invalid),
        }, ApiResponseMap.decoder(Cryptocurrency))

    def quotes_historical(
        self,
        id: Optional[str] = None,
        symbol: Optional[str] = None,
        time_start: Optional[DateLike] = None,
        time_end: Optional[DateLike] = None,
        count: Optional[int] = None,
        interval: Optional[Interval] = None,
        convert: Optional[str] = None,
        convert_id: Optional[str] = None,
        aux: Optional[str] = None
    ) -> Optional[ApiResponse[CryptocurrencyHistoricalData]]:
        """Interval quotes for a cryptocurrency over a time range.

        Raises:
            InvalidArgumentError: If neither id nor symbol is given.
            OutOfRangeError: If count is below 1.
        """
        require_one_of(id=id, symbol=symbol)
        check_min("count", count, 1)

        return self._request("cryptocurrency/quotes/historical", {
            "id": id,
            "symbol": symbol,
            "time_start": format_date(time_start),
            "time_end": format_date(time_end),
            "count": format_number(count),
            "interval": describe(interval),
            "convert": convert,
            "convert_id": convert_id,
            "aux": aux,
        }, ApiResponse.decoder(CryptocurrencyHistoricalData))

    def market_pairs_latest(
        self,
        id: Optional[str] = None,
        slug: Optional[str] = None,
        symbol: Optional[str] = None,
        start: Optional[int] = 1,
        limit: Optional[int] = None,
        sort_dir: Optional[SortDir] = None,
        sort: Optional[SortCryptocurrencyMarketPairsLatest] = None,
        aux: Optional[str] = None,
        matched_id: Optional[str] = None,
        matched_symbol: Optional[str] = None,
        convert: Optional[str] = None,
        convert_id: Optional[str] = None
    ) -> Optional[ApiResponse[CryptocurrencyMarketPairs]]:
        """Active market pairs for a cryptocurrency across all exchanges.

        Args:
            matched_id, matched_symbol: Restrict pairs to those quoted against
                these currencies.

        Raises:
            InvalidArgumentError: If none of id, slug, or symbol is given.
            OutOfRangeError: If start or limit is out of bounds.
        """
        require_one_of(id=id, slug=slug, symbol=symbol)
        _check_pagination(start, limit)

        return self._request("cryptocurrency/market-pairs/latest", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "start": format_number(start),
            "limit": format_number(limit),
            "sort_dir": describe(sort_dir),
            "sort": describe(sort),
            "aux": aux,
            "matched_id": matched_id,
            "matched_symbol": matched_symbol,
            "convert": convert,
            "convert_id": convert_id,
        }, ApiResponse.decoder(CryptocurrencyMarketPairs))

    def ohlcv_latest(
        self,
        id: Optional[str] = None,
        symbol: Optional[str] = None,
        convert: Optional[str] = None,
        convert_id: Optional[str] = None,
        skip_invalid: Optional[bool] = None
    ) -> Optional[ApiResponseMap[CryptocurrencyOhlcvQuotes]]:
        """OHLCV for the current UTC day so far.

        Raises:
            InvalidArgumentError: If neither id nor symbol is given.
        """
        require_one_of(id=id, symbol=symbol)

        return self._request("cryptocurrency/ohlcv/latest", {
            "id": id,
            "symbol": symbol,
            "convert": convert,
            "convert_id": convert_id,
            "skip_invalid": format_bool_flag(skip_invalid),
        }, ApiResponseMap.decoder(CryptocurrencyOhlcvQuotes))

    def ohlcv_historical(
        self,
        id: Optional[str] = None,
        slug: Optional[str] = None,
        symbol: Optional[str] = None,
        time_period: Optional[TimePeriodOhlcvHistorical] = None,
        time_start: Optional[DateLike] = None,
        time_end: Optional[DateLike] = None,
        count: Optional[int] = None,
        interval: Optional[IntervalOhlcvHistorical] = None,
        convert: Optional[str] = None,
        convert_id: Optional[str] = None,
        skip_invalid: Optional[bool] = None
    ) -> Optional[ApiResponse[CryptocurrencyOhlcvHistorical]]:
        """Historical OHLCV time series for a cryptocurrency.

        Raises:
            InvalidArgumentError: If none of id, slug, or symbol is given.
            OutOfRangeError: If count is below 1.
        """
        require_one_of(id=id, slug=slug, symbol=symbol)
        check_min("count", count, 1)

        return self._request("cryptocurrency/ohlcv/historical", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "time_period": describe(time_period),
            "time_start": format_date(time_start),
            "time_end": format_date(time_end),
            "count": format_number(count),
            "interval": describe(interval),
            "convert": convert,
            "convert_id": convert_id,
            "skip_invalid": format_bool_flag(skip_invalid),
        }, ApiResponse.decoder(CryptocurrencyOhlcvHistorical))

    def price_performance_stats(
        self,
        id: Optional[str] = None,
        slug: Optional[str] = None,
        symbol: Optional[str] = None,
        time_period: Optional[TimePeriodPricePerformanceStats] = None,
        convert: Optional[str] = None,
        convert_id: Optional[str] = None
    ) -> Optional[ApiResponseMap[CryptocurrencyPricePerformanceStats]]:
        """Price performance statistics (open/high/low/close per period).

        Args:
            time_period: Period to report; a plain string may list several,
                         comma-separated.

        Raises:
            InvalidArgumentError: If none of id, slug, or symbol is given.
        """
        require_one_of(id=id, slug=slug, symbol=symbol)

        return self._request("cryptocurrency/price-performance-stats/latest", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "time_period": describe(time_period),
            "convert": convert,
            "convert_id": convert_id,
        }, ApiResponseMap.decoder(CryptocurrencyPricePerformanceStats))
