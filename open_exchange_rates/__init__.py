"""Public interface for the open_exchange_rates package."""

from __future__ import annotations

import json
from datetime import timezone
from decimal import Decimal
from email.utils import format_datetime, parsedate_to_datetime
from importlib import metadata as importlib_metadata
from typing import Any, Dict, List, Mapping, Sequence

from open_exchange_rates.cache import CacheEntry, CacheStore, InMemoryCache
from open_exchange_rates.endpoints import (
    ApiEndpoint,
    build_currencies_url,
    build_exchange_rates_url,
    redact_url,
)
from open_exchange_rates.exceptions import (
    APIErrorException,
    DecodeError,
    EmptyAPIKeyError,
    MissingRateError,
    OpenExchangeRatesError,
    TransportError,
    UnexpectedStatusError,
)
from open_exchange_rates.models import Currency, ErrorMessage, RateTable
from open_exchange_rates.transport import HttpTransport, RequestsTransport, TransportResponse
from open_exchange_rates.utils.logger import get_logger

__all__ = [
    "__version__",
    "OpenExchangeRatesClient",
    "ApiEndpoint",
    "RateTable",
    "Currency",
    "ErrorMessage",
    "CacheEntry",
    "CacheStore",
    "InMemoryCache",
    "HttpTransport",
    "RequestsTransport",
    "TransportResponse",
    "OpenExchangeRatesError",
    "EmptyAPIKeyError",
    "APIErrorException",
    "UnexpectedStatusError",
    "DecodeError",
    "TransportError",
    "MissingRateError",
]

try:
    __version__ = importlib_metadata.version("open-exchange-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

LOGGER = get_logger(__name__)

HTTP_OK = 200
HTTP_NOT_MODIFIED = 304
API_ERROR_STATUSES = frozenset({400, 401, 403, 404, 429})


def _reject_constant(token: str) -> Any:
    raise DecodeError(f"Response body contains non-standard JSON constant {token}")


class OpenExchangeRatesClient:
    """Client for the Open Exchange Rates ``latest.json`` and ``currencies.json`` endpoints.

    Every successful response that carries ``ETag`` and ``Date`` headers is
    kept per URL and replayed as ``If-None-Match``/``If-Modified-Since`` on the
    next request, so an unchanged resource costs a ``304`` instead of a full
    body. The cache is private to the instance and is not thread-safe; share a
    client between threads only behind a lock.
    """

    __slots__ = ("api_key", "endpoint", "transport", "_cache", "_owns_transport")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(
        self,
        api_key: str | None,
        use_https: bool = False,
        *,
        transport: HttpTransport | None = None,
        cache: CacheStore | None = None,
        timeout: float | None = 30,
        endpoint: ApiEndpoint | None = None,
    ) -> None:
        """Configure the client.

        ``transport`` may be any object implementing :class:`HttpTransport`;
        when omitted a :class:`RequestsTransport` using ``timeout`` is created
        and closed together with the client. ``endpoint`` overrides host and
        path; its ``use_https`` flag wins over the ``use_https`` argument.
        """

        if not api_key:
            raise EmptyAPIKeyError()

        self.api_key = api_key
        self.endpoint = endpoint or ApiEndpoint(use_https=use_https)
        self._owns_transport = transport is None
        self.transport: HttpTransport = transport or RequestsTransport(
            timeout=timeout,
            user_agent=f"open-exchange-rates/{__version__}",
        )
        self._cache: CacheStore = cache if cache is not None else InMemoryCache()

    @property
    def use_https(self) -> bool:
        return self.endpoint.use_https

    def get_exchange_rates(
        self,
        base_currency: str | None = None,
        symbols: Sequence[str] | None = None,
    ) -> RateTable:
        """Retrieve the latest exchange rates.

        ``base_currency`` changes the currency rates are expressed against and
        ``symbols`` limits the response to the listed currency codes; both are
        plan-dependent on the API side and surface as
        :class:`APIErrorException` when not allowed.
        """

        url = self.build_exchange_rates_url(base_currency, symbols)
        payload = self._decode(self._fetch(url))
        try:
            return RateTable.from_dict(payload)
        except (TypeError, ValueError) as exc:
            raise DecodeError(f"Unexpected exchange rates body: {exc}") from exc

    def get_currencies(self) -> List[Currency]:
        """Retrieve every currency supported by Open Exchange Rates."""

        url = self.build_currencies_url()
        payload = self._decode(self._fetch(url))
        if not all(isinstance(code, str) and isinstance(name, str) for code, name in payload.items()):
            raise DecodeError("Unexpected currencies body: expected a code to name mapping")
        return [Currency(code=code, full_name=name) for code, name in payload.items()]

    def build_exchange_rates_url(
        self,
        base_currency: str | None = None,
        symbols: Sequence[str] | None = None,
    ) -> str:
        return build_exchange_rates_url(self.endpoint, self.api_key, base_currency, symbols)

    def build_currencies_url(self) -> str:
        return build_currencies_url(self.endpoint)

    def close(self) -> None:
        """Release the transport if this client created it."""

        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "OpenExchangeRatesClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _fetch(self, url: str) -> str:
        """Send a GET to ``url`` and return the JSON text of the response."""

        cached = self._cache.get(url)
        headers: Dict[str, str] = {}
        if cached is not None:
            headers["If-None-Match"] = cached.etag
            headers["If-Modified-Since"] = self._http_date(cached.last_modified)

        LOGGER.info("Fetching %s", redact_url(url))
        response = self.transport.get(url, headers)
        status = response.status_code

        if status == HTTP_OK:
            etag = response.headers.get("ETag")
            date = response.headers.get("Date")
            if etag is not None and date is not None:
                self._cache.put(url, CacheEntry(etag=etag, last_modified=date, body=response.text))
                LOGGER.debug("Cached response for %s (ETag %s)", redact_url(url), etag)
            return response.text

        if status == HTTP_NOT_MODIFIED:
            if cached is None:
                # A 304 without a conditional request means there is no body to fall back on.
                raise UnexpectedStatusError(status)
            LOGGER.debug("Not modified, serving cached body for %s", redact_url(url))
            return cached.body

        self._cache.remove(url)
        if status in API_ERROR_STATUSES:
            payload = self._decode(response.text)
            try:
                error_message = ErrorMessage.from_dict(payload)
            except (TypeError, ValueError) as exc:
                raise DecodeError(f"Unexpected error body: {exc}") from exc
            LOGGER.warning("API error for %s: %s", redact_url(url), error_message.message)
            raise APIErrorException(error_message)

        LOGGER.warning("Unexpected HTTP status %s for %s", status, redact_url(url))
        raise UnexpectedStatusError(status)

    @staticmethod
    def _decode(text: str) -> Mapping[str, Any]:
        try:
            payload = json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Response body is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise DecodeError("Response body is not a JSON object")
        return payload

    @staticmethod
    def _http_date(value: str) -> str:
        """Normalise a stored ``Date`` header into an IMF-fixdate string."""

        try:
            parsed = parsedate_to_datetime(value)
        except (TypeError, ValueError):
            LOGGER.debug("Could not parse cached Date header %r, sending it unchanged", value)
            return value
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return format_datetime(parsed.astimezone(timezone.utc), usegmt=True)
