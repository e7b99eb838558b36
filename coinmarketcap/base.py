"""Base class for CoinMarketCap endpoint clients."""

from typing import Any, Callable, Optional, TypeVar

import requests

from .config import ClientSettings, base_url_for
from .executor import RequestExecutor
from .utils.encoding import ParameterBag

T = TypeVar("T")


class ApiClientBase:
    """Shared plumbing for endpoint clients.

    The base URL is chosen from the sandbox flag once, at construction, and
    never changes for the lifetime of the client. Subclasses validate their
    arguments, build a parameter bag, and call `_request`.
    """

    def __init__(
        self,
        api_key: str,
        sandbox: bool = False,
        timeout: float = 30,
        session: Optional[requests.Session] = None
    ):
        """Initialize the client.

        Args:
            api_key: CoinMarketCap API key.
            sandbox: Use https://sandbox-api.coinmarketcap.com instead of the
                     production API (default: False).
            timeout: Request timeout in seconds (default: 30).
            session: Optional requests session to send requests through.
        """
        self.sandbox = sandbox
        self.base_url = base_url_for(sandbox)
        self.executor = RequestExecutor(
            base_url=self.base_url,
            api_key=api_key,
            timeout=timeout,
            session=session
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs):
        return cls(
            api_key=settings.api_key,
            sandbox=settings.sandbox,
            timeout=settings.timeout,
            **kwargs
        )

    @classmethod
    def from_env(cls, **kwargs):
        """Build a client from COINMARKETCAP_API_KEY / COINMARKETCAP_SANDBOX."""
        return cls.from_settings(ClientSettings.from_env(), **kwargs)

    def _request(
        self,
        path: str,
        params: ParameterBag,
        decoder: Callable[[Any], T]
    ) -> Optional[T]:
        return self.executor.execute(path, params, decoder)

    def close(self) -> None:
        self.executor.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
