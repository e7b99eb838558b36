"""Shared test helpers."""

import json
from unittest.mock import MagicMock


def make_response(body, status_code=200):
    """Build a mock requests.Response carrying the given body.

    Dicts and lists are serialized to JSON; strings are used verbatim.
    """
    text = body if isinstance(body, str) or body is None else json.dumps(body)
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response
