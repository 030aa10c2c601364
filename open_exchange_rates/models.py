"""Data models decoded from Open Exchange Rates responses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from open_exchange_rates.exceptions import MissingRateError

CURRENCY_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


def to_decimal(value: object) -> Decimal:
    """Coerce ``value`` into a :class:`~decimal.Decimal` via its string form."""

    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric value: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class RateTable:
    """Snapshot of exchange rates relative to ``base`` at ``timestamp``."""

    disclaimer: str
    license: str
    timestamp: int
    base: str
    rates: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        checked: dict[str, Decimal] = {}
        for code, value in (self.rates or {}).items():
            if not isinstance(code, str) or not CURRENCY_CODE_PATTERN.match(code):
                raise ValueError(f"Invalid currency code in rates: {code!r}")
            rate = to_decimal(value)
            if not rate.is_finite() or rate <= 0:
                raise ValueError(f"Rate for {code} must be positive, got {rate}")
            checked[code] = rate
        object.__setattr__(self, "rates", MappingProxyType(checked))

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RateTable":
        """Build a table from a decoded ``latest.json`` body."""

        rates = payload.get("rates")
        if not isinstance(rates, Mapping):
            raise ValueError("Response body has no 'rates' object")
        return cls(
            disclaimer=payload.get("disclaimer") or "",
            license=payload.get("license") or "",
            timestamp=int(payload.get("timestamp") or 0),
            base=payload.get("base") or "",
            rates=rates,
        )

    @property
    def published_at(self) -> datetime:
        """Return :attr:`timestamp` as an aware UTC datetime."""

        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def conversion_rate(self, from_currency: str, to_currency: str) -> Decimal:
        """Return the multiplier turning an amount in ``from_currency`` into ``to_currency``.

        Tables holding fewer than two rates cannot express a conversion and are
        rejected, as are currency codes the table does not contain.
        """

        if len(self.rates) < 2:
            raise MissingRateError("No exchange rates stored in the rates of this table")
        try:
            from_rate = self.rates[from_currency]
        except KeyError:
            raise MissingRateError(f"Incorrect currency code: {from_currency}") from None
        try:
            to_rate = self.rates[to_currency]
        except KeyError:
            raise MissingRateError(f"Incorrect currency code: {to_currency}") from None
        return to_rate / from_rate

    def convert(self, from_currency: str, to_currency: str, amount: object) -> Decimal:
        """Convert ``amount`` from one currency into another."""

        return to_decimal(amount) * self.conversion_rate(from_currency, to_currency)

    def convert_many(
        self, from_currency: str, to_currency: str, amounts: Iterable[object]
    ) -> list[Decimal]:
        """Convert every value in ``amounts``, keeping their order."""

        rate = self.conversion_rate(from_currency, to_currency)
        return [to_decimal(amount) * rate for amount in amounts]


@dataclass(frozen=True, slots=True)
class Currency:
    """A currency supported by the API."""

    code: str
    full_name: str


@dataclass(slots=True)
class ErrorMessage:
    """Decoded error body returned alongside 4xx responses."""

    error: bool
    status: int
    message: str
    description: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ErrorMessage":
        return cls(
            error=bool(payload.get("error", True)),
            status=int(payload.get("status") or 0),
            message=str(payload.get("message") or ""),
            description=str(payload.get("description") or ""),
        )

    def __str__(self) -> str:
        return f"[{self.status}] {self.message}\n{self.description}"


__all__ = ["RateTable", "Currency", "ErrorMessage", "CURRENCY_CODE_PATTERN", "to_decimal"]
