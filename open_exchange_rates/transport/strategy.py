"""Abstractions for pluggable HTTP transports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol

from requests.structures import CaseInsensitiveDict


@dataclass(slots=True)
class TransportResponse:
    """Status, headers and fully-buffered body text of one HTTP response."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""

    def __post_init__(self) -> None:
        # Header lookups must not depend on the casing the server used.
        self.headers = CaseInsensitiveDict(self.headers or {})


class HttpTransport(Protocol):
    """Contract for issuing GET requests on behalf of the client.

    Implementations return every status code as a :class:`TransportResponse`
    instead of raising for 4xx/5xx; the client interprets status codes itself.
    """

    def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        ...  # pragma: no cover - protocol definition

    def close(self) -> None:
        ...  # pragma: no cover - protocol definition


__all__ = ["HttpTransport", "TransportResponse"]
