"""Client settings resolved from explicit values or environment variables."""

import os
from dataclasses import dataclass
from typing import Optional

PRODUCTION_BASE_URL = "https://pro-api.coinmarketcap.com/v1/"
SANDBOX_BASE_URL = "https://sandbox-api.coinmarketcap.com/v1/"

API_KEY_ENV = "COINMARKETCAP_API_KEY"
SANDBOX_ENV = "COINMARKETCAP_SANDBOX"


def base_url_for(sandbox: bool) -> str:
    return SANDBOX_BASE_URL if sandbox else PRODUCTION_BASE_URL


@dataclass(frozen=True)
class ClientSettings:
    """Credentials and endpoint selection for a client."""
    api_key: str
    sandbox: bool = False
    timeout: float = 30

    @property
    def base_url(self) -> str:
        return base_url_for(self.sandbox)

    @classmethod
    def from_env(
        cls,
        api_key: Optional[str] = None,
        sandbox: Optional[bool] = None,
        timeout: float = 30
    ) -> "ClientSettings":
        """Build settings, falling back to environment variables.

        Args:
            api_key: API key. If not provided, reads from COINMARKETCAP_API_KEY env var.
            sandbox: Use the sandbox API. If not provided, reads COINMARKETCAP_SANDBOX;
                     only a case-insensitive "true" enables it.
            timeout: Request timeout in seconds (default: 30).

        Raises:
            ValueError: If no API key can be found.
        """
        api_key = api_key or os.getenv(API_KEY_ENV)
        if not api_key:
            raise ValueError(f"CoinMarketCap API key is required. Set {API_KEY_ENV} environment variable or pass api_key parameter.")

        if sandbox is None:
            sandbox = (os.getenv(SANDBOX_ENV) or "").strip().lower() == "true"

        return cls(api_key=api_key, sandbox=sandbox, timeout=timeout)
