"""Wire values for the symbolic query parameters of the cryptocurrency endpoints."""

from enum import Enum
from typing import Optional


class SortDir(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CryptocurrencyType(str, Enum):
    ALL = "all"
    COINS = "coins"
    TOKENS = "tokens"


class SortCryptocurrencyMap(str, Enum):
    ID = "id"
    CMC_RANK = "cmc_rank"


class SortCryptocurrencyListingsLatest(str, Enum):
    NAME = "name"
    SYMBOL = "symbol"
    DATE_ADDED = "date_added"
    MARKET_CAP = "market_cap"
    MARKET_CAP_STRICT = "market_cap_strict"
    PRICE = "price"
    CIRCULATING_SUPPLY = "circulating_supply"
    TOTAL_SUPPLY = "total_supply"
    MAX_SUPPLY = "max_supply"
    NUM_MARKET_PAIRS = "num_market_pairs"
    VOLUME_24H = "volume_24h"
    PERCENT_CHANGE_1H = "percent_change_1h"
    PERCENT_CHANGE_24H = "percent_change_24h"
    PERCENT_CHANGE_7D = "percent_change_7d"
    MARKET_CAP_BY_TOTAL_SUPPLY_STRICT = "market_cap_by_total_supply_strict"
    VOLUME_7D = "volume_7d"
    VOLUME_30D = "volume_30d"


class SortCryptocurrencyListingsHistorical(str, Enum):
    CMC_RANK = "cmc_rank"
    NAME = "name"
    SYMBOL = "symbol"
    DATE_ADDED = "date_added"
    MARKET_CAP = "market_cap"
    PRICE = "price"
    CIRCULATING_SUPPLY = "circulating_supply"
    TOTAL_SUPPLY = "total_supply"
    MAX_SUPPLY = "max_supply"
    VOLUME_24H = "volume_24h"
    PERCENT_CHANGE_1H = "percent_change_1h"
    PERCENT_CHANGE_24H = "percent_change_24h"
    PERCENT_CHANGE_7D = "percent_change_7d"
    MARKET_CAP_BY_TOTAL_SUPPLY_STRICT = "market_cap_by_total_supply_strict"
    VOLUME_7D = "volume_7d"


class SortCryptocurrencyMarketPairsLatest(str, Enum):
    VOLUME_24H_STRICT = "volume_24h_strict"
    CMC_RANK = "cmc_rank"
    CMC_RANK_ADVANCED = "cmc_rank_advanced"
    EFFECTIVE_LIQUIDITY = "effective_liquidity"
    MARKET_SCORE = "market_score"
    MARKET_REPUTATION = "market_reputation"


class Interval(str, Enum):
    """Sampling interval for historical quotes."""
    YEARLY = "yearly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"
    HOURLY = "hourly"
    MINUTES_5 = "5m"
    MINUTES_10 = "10m"
    MINUTES_15 = "15m"
    MINUTES_30 = "30m"
    MINUTES_45 = "45m"
    HOURS_1 = "1h"
    HOURS_2 = "2h"
    HOURS_3 = "3h"
    HOURS_4 = "4h"
    HOURS_6 = "6h"
    HOURS_12 = "12h"
    HOURS_24 = "24h"
    DAYS_1 = "1d"
    DAYS_2 = "2d"
    DAYS_3 = "3d"
    DAYS_7 = "7d"
    DAYS_14 = "14d"
    DAYS_15 = "15d"
    DAYS_30 = "30d"
    DAYS_60 = "60d"
    DAYS_90 = "90d"
    DAYS_365 = "365d"


class IntervalOhlcvHistorical(str, Enum):
    """Sampling interval for historical OHLCV."""
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    HOURS_1 = "1h"
    HOURS_2 = "2h"
    HOURS_3 = "3h"
    HOURS_4 = "4h"
    HOURS_6 = "6h"
    HOURS_12 = "12h"
    DAYS_1 = "1d"
    DAYS_2 = "2d"
    DAYS_3 = "3d"
    DAYS_7 = "7d"
    DAYS_14 = "14d"
    DAYS_15 = "15d"
    DAYS_30 = "30d"
    DAYS_60 = "60d"
    DAYS_90 = "90d"
    DAYS_365 = "365d"


class TimePeriodOhlcvHistorical(str, Enum):
    DAILY = "daily"
    HOURLY = "hourly"


class TimePeriodPricePerformanceStats(str, Enum):
    ALL_TIME = "all_time"
    YESTERDAY = "yesterday"
    HOURS_24 = "24h"
    DAYS_7 = "7d"
    DAYS_30 = "30d"
    DAYS_90 = "90d"
    DAYS_365 = "365d"


def describe(value: Optional[Enum]) -> Optional[str]:
    """Return the wire string for an enum member, or None when omitted.

    Plain strings pass through so callers may use values the enums don't
    list yet (e.g. a comma-separated set of time periods).
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    return str(value)
