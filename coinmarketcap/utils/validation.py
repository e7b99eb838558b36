"""Argument checks and wire formatting shared by the endpoint methods."""

from datetime import date, datetime
from typing import Optional, Union

from ..errors import InvalidArgumentError, OutOfRangeError


Number = Union[int, float]


def require_one_of(**candidates: Optional[str]) -> None:
    """Ensure at least one identifier in an alternative set is given.

    Args:
        **candidates: Identifier names mapped to the caller's values, in the
            order they should be listed in the error message.

    Raises:
        InvalidArgumentError: If every value is None, empty, or whitespace.
    """
    for value in candidates.values():
        if value is not None and str(value).strip():
            return

    names = list(candidates)
    if len(names) > 1:
        listed = ", ".join(names[:-1]) + f", or {names[-1]}"
    else:
        listed = names[0]
    raise InvalidArgumentError(f"Must specify one of: {listed}")


def check_min(name: str, value: Optional[Number], minimum: Number) -> None:
    """Raise OutOfRangeError if value is below minimum. None is accepted."""
    if value is not None and value < minimum:
        raise OutOfRangeError(name, value, f"greater than or equal to {minimum}")


def check_range(name: str, value: Optional[Number], lower: Number, upper: Number) -> None:
    """Raise OutOfRangeError unless lower <= value <= upper. None is accepted."""
    if value is not None and not lower <= value <= upper:
        raise OutOfRangeError(name, value, f"between {lower} and {upper}")


def format_number(value: Optional[Number]) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def format_date(value: Optional[Union[date, datetime, str]]) -> Optional[str]:
    """Format a date as YYYY-MM-DD. Strings are passed through as-is."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return value


def format_bool_flag(value: Optional[bool]) -> Optional[str]:
    """Encode flags the API only reads when enabled: 'true', otherwise omitted."""
    return "true" if value else None
