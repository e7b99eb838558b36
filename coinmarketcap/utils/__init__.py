"""Request encoding and argument validation helpers."""

from .encoding import clean_params, encode_request
from .validation import (
    check_min,
    check_range,
    format_bool_flag,
    format_date,
    format_number,
    require_one_of,
)

__all__ = [
    "clean_params",
    "encode_request",
    "check_min",
    "check_range",
    "format_bool_flag",
    "format_date",
    "format_number",
    "require_one_of",
]
