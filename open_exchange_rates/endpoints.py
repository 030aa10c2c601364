"""Endpoint configuration and URL construction for the Open Exchange Rates API."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

DEFAULT_API_HOST = "openexchangerates.org"
DEFAULT_API_PATH = "/api/"

EXCHANGE_RATES_PATH = "latest.json"
CURRENCIES_PATH = "currencies.json"

_APP_ID_PATTERN = re.compile(r"(app_id=)[^&]*")


@dataclass(slots=True)
class ApiEndpoint:
    """Where the client sends its requests."""

    host: str = DEFAULT_API_HOST
    path: str = DEFAULT_API_PATH
    use_https: bool = False

    @property
    def scheme(self) -> str:
        return "https" if self.use_https else "http"

    @property
    def base_url(self) -> str:
        """Return ``<scheme>://<host><path>`` with exactly one trailing slash."""

        path = "/" + self.path.strip("/") + "/" if self.path.strip("/") else "/"
        return f"{self.scheme}://{self.host}{path}"


def build_exchange_rates_url(
    endpoint: ApiEndpoint,
    api_key: str,
    base_currency: str | None = None,
    symbols: Sequence[str] | None = None,
) -> str:
    """Assemble the ``latest.json`` URL.

    Parameters always appear as ``app_id``, ``base`` then ``symbols``; callers
    and the remote API both rely on this exact text, so values are not
    re-encoded.
    """

    url = f"{endpoint.base_url}{EXCHANGE_RATES_PATH}?app_id={api_key}"
    if base_currency:
        url += f"&base={base_currency}"
    if isinstance(symbols, str):
        symbols = (symbols,)
    if symbols:
        url += "&symbols=" + ",".join(symbols)
    return url


def build_currencies_url(endpoint: ApiEndpoint) -> str:
    """Assemble the ``currencies.json`` URL (a public endpoint, no ``app_id``)."""

    return f"{endpoint.base_url}{CURRENCIES_PATH}"


def redact_url(url: str) -> str:
    """Hide the ``app_id`` value so URLs can be logged."""

    return _APP_ID_PATTERN.sub(r"\1***", url)


__all__ = [
    "ApiEndpoint",
    "DEFAULT_API_HOST",
    "DEFAULT_API_PATH",
    "build_currencies_url",
    "build_exchange_rates_url",
    "redact_url",
]
