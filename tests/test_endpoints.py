from __future__ import annotations

import pytest

from open_exchange_rates.endpoints import (
    ApiEndpoint,
    build_currencies_url,
    build_exchange_rates_url,
    redact_url,
)

API_KEY = "K123"
LATEST = "http://openexchangerates.org/api/latest.json?app_id=" + API_KEY


def test_exchange_rates_url_without_options() -> None:
    assert build_exchange_rates_url(ApiEndpoint(), API_KEY) == LATEST


def test_exchange_rates_url_with_base() -> None:
    assert build_exchange_rates_url(ApiEndpoint(), API_KEY, "EUR") == LATEST + "&base=EUR"


def test_exchange_rates_url_with_symbols() -> None:
    url = build_exchange_rates_url(ApiEndpoint(), API_KEY, symbols=["EUR", "CNY", "USD"])

    assert url == LATEST + "&symbols=EUR,CNY,USD"


def test_exchange_rates_url_with_base_and_symbols() -> None:
    url = build_exchange_rates_url(ApiEndpoint(), API_KEY, "EUR", ("EUR", "CNY", "USD"))

    assert url == LATEST + "&base=EUR&symbols=EUR,CNY,USD"


@pytest.mark.parametrize("base, symbols", [("", None), (None, []), ("", [])])
def test_exchange_rates_url_ignores_empty_options(base, symbols) -> None:
    assert build_exchange_rates_url(ApiEndpoint(), API_KEY, base, symbols) == LATEST


def test_https_endpoint_changes_scheme_only() -> None:
    endpoint = ApiEndpoint(use_https=True)

    assert build_exchange_rates_url(endpoint, API_KEY) == (
        "https://openexchangerates.org/api/latest.json?app_id=K123"
    )
    assert build_currencies_url(endpoint) == "https://openexchangerates.org/api/currencies.json"


def test_currencies_url_has_no_query() -> None:
    assert build_currencies_url(ApiEndpoint()) == "http://openexchangerates.org/api/currencies.json"


@pytest.mark.parametrize("path", ["/api/", "api", "/api", "api/"])
def test_base_url_normalises_path_slashes(path: str) -> None:
    assert ApiEndpoint(host="localhost:8080", path=path).base_url == "http://localhost:8080/api/"


def test_base_url_with_root_path() -> None:
    assert ApiEndpoint(host="localhost", path="/").base_url == "http://localhost/"


def test_redact_url_hides_app_id() -> None:
    assert redact_url(LATEST + "&base=EUR") == (
        "http://openexchangerates.org/api/latest.json?app_id=***&base=EUR"
    )
    assert redact_url("http://openexchangerates.org/api/currencies.json").endswith("currencies.json")


def test_exchange_rates_url_accepts_single_symbol_string() -> None:
    url = build_exchange_rates_url(ApiEndpoint(), API_KEY, "USD", "EUR")

    assert url == LATEST + "&base=USD&symbols=EUR"
