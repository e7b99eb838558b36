"""Single-shot HTTP execution and response decoding for the CoinMarketCap API."""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from http.cookiejar import DefaultCookiePolicy
from typing import Any, Callable, Optional, TypeVar

import requests

from .errors import DecodeError
from .utils.encoding import ParameterBag, encode_request

logger = logging.getLogger(__name__)

T = TypeVar("T")

API_KEY_HEADER = "X-CMC_PRO_API_KEY"


class ResponseOrigin(Enum):
    """Where a captured body came from."""
    SUCCESS = "success"
    ERROR_BODY = "error_body"


@dataclass
class RawResponse:
    """Body text returned by the transport, tagged with its origin."""
    origin: ResponseOrigin
    text: Optional[str]
    status_code: int

    @property
    def is_blank(self) -> bool:
        return self.text is None or not self.text.strip()


class RequestExecutor:
    """Executes one GET per call against a fixed base URL.

    Successful responses and non-2xx responses that still carry a body go
    through the same decode step: the API reports errors as structured JSON,
    which the caller's envelope type is expected to represent. Failures with no
    response at all (DNS, refused connection, timeout, TLS) propagate as the
    original requests exception.

    Configuration is fixed at construction and only read afterwards, and the
    session keeps no cookies, so an executor may be shared between threads.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None
    ):
        """Initialize the executor.

        Args:
            base_url: API root ending with '/'.
            api_key: CoinMarketCap API key sent with every request.
            timeout: Request timeout in seconds (default: 30).
            session: Optional pre-built requests session. Its cookie policy is
                     replaced so that no cookies are kept.
        """
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            API_KEY_HEADER: api_key,
            'Accept': 'application/json',
        })
        # Calls are independent: cookies set by a response are never stored
        # or sent back on later requests.
        self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    def fetch(self, path: str, params: Optional[ParameterBag] = None) -> RawResponse:
        """Perform the GET request and capture the body.

        Args:
            path: Endpoint path relative to the base URL.
            params: Parameter bag; blank entries are dropped.

        Returns:
            RawResponse tagged SUCCESS for 2xx, ERROR_BODY otherwise.

        Raises:
            requests.exceptions.RequestException: If no response was received,
                or its body could not be read.
        """
        url = encode_request(self.base_url, path, params)
        logger.debug(f"GET {path}")

        response = self.session.get(url, timeout=self.timeout)
        text = response.text

        if 200 <= response.status_code < 300:
            return RawResponse(ResponseOrigin.SUCCESS, text, response.status_code)

        logger.debug(f"HTTP {response.status_code} from {path}, decoding error body")
        return RawResponse(ResponseOrigin.ERROR_BODY, text, response.status_code)

    def decode(self, raw: RawResponse, decoder: Callable[[Any], T]) -> Optional[T]:
        """Decode a captured body into the caller's result type.

        Args:
            raw: Body captured by fetch().
            decoder: Callable turning the parsed JSON into the result type.

        Returns:
            The decoded result, or None when the body is empty or whitespace.

        Raises:
            DecodeError: If the body is not JSON, or the decoder rejects its shape.
        """
        if raw.is_blank:
            return None

        try:
            payload = json.loads(raw.text)
        except ValueError as e:
            raise DecodeError(
                f"Malformed JSON in HTTP {raw.status_code} response: {str(e)}",
                status_code=raw.status_code,
                text=raw.text
            ) from e

        try:
            return decoder(payload)
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            raise DecodeError(
                f"Unexpected response shape in HTTP {raw.status_code} response: {str(e)}",
                status_code=raw.status_code,
                text=raw.text
            ) from e

    def execute(
        self,
        path: str,
        params: Optional[ParameterBag],
        decoder: Callable[[Any], T]
    ) -> Optional[T]:
        """Fetch an endpoint and decode its body.

        Raises:
            requests.exceptions.RequestException: On transport failure.
            DecodeError: If a non-blank body cannot be decoded.
        """
        return self.decode(self.fetch(path, params), decoder)

    def close(self) -> None:
        self.session.close()
