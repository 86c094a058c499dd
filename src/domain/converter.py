from __future__ import annotations

import math

from .rates import BASE_CURRENCY, RateTable


class ConversionError(ValueError):
    pass


class InvalidAmountError(ConversionError):
    def __init__(self, amount: float) -> None:
        super().__init__(f"Amount must be greater than 0, got {amount!r}")
        self.amount = amount


class CurrencyNotFoundError(ConversionError):
    def __init__(self, code: str) -> None:
        super().__init__(f"Currency {code} not found in exchange table")
        self.code = code


def convert(
    table: RateTable,
    from_code: str,
    to_code: str,
    amount: float,
    *,
    base_currency: str = BASE_CURRENCY,
) -> float:
    """Convert ``amount`` of ``from_code`` into ``to_code`` by pivoting through the base currency.

    Codes are upper-cased before any comparison. Converting a code into itself
    returns ``amount`` untouched, even when the code is not in the table.
    The result is not rounded.
    """
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(amount)

    source = from_code.upper()
    target = to_code.upper()
    base = base_currency.upper()

    if source == target:
        return amount

    amount_in_base = amount * _resolve_rate(table, source, base=base)
    return amount_in_base / _resolve_rate(table, target, base=base)


def _resolve_rate(table: RateTable, code: str, *, base: str) -> float:
    if code == base:
        return 1.0
    rate = table.lookup(code)
    if rate is None:
        raise CurrencyNotFoundError(code)
    return rate.rate


__all__ = ["ConversionError", "CurrencyNotFoundError", "InvalidAmountError", "convert"]
