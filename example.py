from decimal import Decimal

from open_exchange_rates import APIErrorException, OpenExchangeRatesClient

print(OpenExchangeRatesClient.__version__)  # 0.1.0

with OpenExchangeRatesClient("<your app id>", use_https=True) as client:
    # Latest rates against the account's default base (USD)
    rates = client.get_exchange_rates()
    print(rates.base, rates.published_at, len(rates.rates))

    # Conversions are exact decimals
    print(rates.conversion_rate("EUR", "CNY"))
    print(rates.convert("EUR", "CNY", Decimal("4.50")))
    print(rates.convert_many("USD", "EUR", [Decimal("4.50"), Decimal("10.20"), 7]))

    # A second call for the same URL is answered with 304 and served from the cache
    rates = client.get_exchange_rates()

    # Supported currencies
    currencies = client.get_currencies()
    print(currencies[:3])

    # Changing the base currency requires a paid plan
    try:
        client.get_exchange_rates("EUR", ["EUR", "CNY", "USD"])
    except APIErrorException as exc:
        print(exc.error_message)
