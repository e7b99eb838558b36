"""Query-string encoding for API requests."""

from typing import Dict, Mapping, Optional

import requests


ParameterBag = Mapping[str, Optional[str]]


def clean_params(params: Optional[ParameterBag]) -> Dict[str, str]:
    """Drop parameters whose value is missing, empty, or only whitespace.

    Surviving entries keep their original order.
    """
    if not params:
        return {}
    return {
        key: value
        for key, value in params.items()
        if value is not None and str(value).strip()
    }


def encode_request(base_url: str, path: str, params: Optional[ParameterBag] = None) -> str:
    """Build the absolute request URL for an endpoint.

    Args:
        base_url: API root, ending with '/' (e.g. 'https://pro-api.coinmarketcap.com/v1/').
        path: Endpoint path without a leading '/' (e.g. 'cryptocurrency/map').
        params: Wire parameter names mapped to optional string values.

    Returns:
        The URL with a form-encoded query string. Blank parameters are left out
        entirely, and no '?' is added when nothing survives.
    """
    prepared = requests.PreparedRequest()
    prepared.prepare_url(f"{base_url}{path}", clean_params(params))
    return prepared.url
