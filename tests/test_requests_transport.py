from __future__ import annotations

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from open_exchange_rates.exceptions import TransportError
from open_exchange_rates.transport import HttpTransport, RequestsTransport, TransportResponse


class _DummyResponse:
    def __init__(self, status_code: int, headers: dict[str, str], text: str, encoding: str | None = None) -> None:
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers)
        self.text = text
        self.encoding = encoding


class _DummySession:
    def __init__(self, response: _DummyResponse | None = None, error: Exception | None = None) -> None:
        self.headers = CaseInsensitiveDict()
        self.response = response
        self.error = error
        self.calls: list[tuple[str, dict[str, str], float | None]] = []
        self.closed = False

    def get(self, url: str, *, headers: dict[str, str], timeout: float | None):
        self.calls.append((url, headers, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


def test_get_returns_status_headers_and_text() -> None:
    session = _DummySession(_DummyResponse(304, {"ETag": "e1"}, ""))
    transport = RequestsTransport(session=session, timeout=12)  # type: ignore[arg-type]

    response = transport.get("http://example.test/latest.json", {"If-None-Match": "e1"})

    assert response.status_code == 304
    assert response.headers["etag"] == "e1"
    assert response.text == ""
    assert session.calls == [("http://example.test/latest.json", {"If-None-Match": "e1"}, 12)]


def test_error_statuses_are_returned_not_raised() -> None:
    session = _DummySession(_DummyResponse(401, {}, '{"error": true}', encoding="utf-8"))
    transport = RequestsTransport(session=session)  # type: ignore[arg-type]

    response = transport.get("http://example.test/", {})

    assert response.status_code == 401
    assert response.text == '{"error": true}'


def test_request_exceptions_are_wrapped() -> None:
    error = requests.ConnectionError("connection refused")
    transport = RequestsTransport(session=_DummySession(error=error))  # type: ignore[arg-type]

    with pytest.raises(TransportError) as excinfo:
        transport.get("http://example.test/", {})

    assert excinfo.value.__cause__ is error


def test_injected_session_is_not_closed() -> None:
    session = _DummySession()
    RequestsTransport(session=session).close()  # type: ignore[arg-type]

    assert session.closed is False


def test_owned_session_gets_default_headers(monkeypatch) -> None:
    closed: list[bool] = []
    monkeypatch.setattr(requests.Session, "close", lambda self: closed.append(True))

    transport = RequestsTransport(user_agent="open-exchange-rates/test")
    transport.close()

    assert transport.session.headers["User-Agent"] == "open-exchange-rates/test"
    assert transport.session.headers["Accept"] == "application/json"
    assert closed == [True]


def test_transport_response_headers_are_case_insensitive() -> None:
    response = TransportResponse(200, {"ETag": "e1", "Date": "D1"}, "{}")

    assert response.headers["etag"] == "e1"
    assert response.headers.get("DATE") == "D1"


def test_requests_transport_satisfies_protocol() -> None:
    transport: HttpTransport = RequestsTransport(session=_DummySession())  # type: ignore[arg-type]

    assert callable(transport.get)
    assert callable(transport.close)
