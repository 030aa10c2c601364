"""HTTP transports used by the client."""

from __future__ import annotations

from open_exchange_rates.transport.requests_transport import RequestsTransport
from open_exchange_rates.transport.strategy import HttpTransport, TransportResponse

__all__ = ["HttpTransport", "RequestsTransport", "TransportResponse"]
