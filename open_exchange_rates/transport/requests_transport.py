"""Default transport built on a :class:`requests.Session`."""

from __future__ import annotations

from typing import Mapping

import requests

from open_exchange_rates.exceptions import TransportError
from open_exchange_rates.transport.strategy import TransportResponse
from open_exchange_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


class RequestsTransport:
    """Blocking GET requests through a shared session.

    Timeouts are configured here; the client itself has no timeout handling.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float | None = 30,
        user_agent: str | None = None,
    ) -> None:
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        if self._owns_session:
            self.session.headers.update({"Accept": "application/json"})
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        try:
            response = self.session.get(url, headers=dict(headers), timeout=self.timeout)
        except requests.RequestException as exc:
            LOGGER.debug("GET %s failed: %s", url, exc)
            raise TransportError(f"Request to Open Exchange Rates failed: {exc}") from exc
        # The API always answers in UTF-8; don't let requests guess from a bare content type.
        response.encoding = response.encoding or "utf-8"
        return TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            text=response.text,
        )

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "RequestsTransport":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # pragma: no cover - trivial
        self.close()


__all__ = ["RequestsTransport"]
