from __future__ import annotations

import re
from typing import Callable

from domain.converter import ConversionError, convert
from domain.rates import BASE_CURRENCY, RateTable
from utils.formatting import format_amount, format_rate_line, render_rate_table

MENU_LINES = (
    "1. List all rates",
    "2. Convert amount",
    "3. Look up rate",
    "4. Exit",
)

_AMOUNT_RE = re.compile(r"-?\d+(\.\d+)?")


class MenuManager:
    """Interactive text menu over an already loaded exchange table."""

    def __init__(
        self,
        table: RateTable,
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        self.table = table
        self._input = input_fn
        self._output = output_fn
        self.base_currency = base_currency.upper()

    def run(self) -> None:
        actions: dict[str, Callable[[], None]] = {
            "1": self.show_all_rates,
            "2": self.convert_currency,
            "3": self.show_single_rate,
        }
        while True:
            for line in MENU_LINES:
                self._output(line)
            try:
                choice = self._input("> ").strip()
            except EOFError:
                return
            if choice == "4":
                return
            action = actions.get(choice)
            if action is None:
                self._output(f"Unknown option: {choice!r}")
                continue
            try:
                action()
            except EOFError:
                return

    def show_all_rates(self) -> None:
        for line in render_rate_table(self.table):
            self._output(line)

    def convert_currency(self) -> None:
        from_code = self._input("Source currency code (e.g. EUR): ").strip().upper()
        to_code = self._input("Target currency code: ").strip().upper()
        raw_amount = self._input("Amount: ").strip()

        amount = parse_amount(raw_amount)
        if amount is None:
            self._output(f"Error: {raw_amount!r} is not a number")
            return

        try:
            result = convert(self.table, from_code, to_code, amount, base_currency=self.base_currency)
        except ConversionError as exc:
            self._output(f"Error: {exc}")
            return
        self._output(f"{format_amount(amount)} {from_code} = {format_amount(result)} {to_code}")

    def show_single_rate(self) -> None:
        code = self._input("Currency code: ").strip().upper()
        if code == self.base_currency:
            self._output(f"{code} is the base currency of this table")
            return
        rate = self.table.lookup(code)
        if rate is None:
            self._output(f"Currency {code} not found in exchange table")
            return
        self._output(format_rate_line(rate))


def parse_amount(raw: str) -> float | None:
    normalized = raw.strip().replace(",", ".")
    if not _AMOUNT_RE.fullmatch(normalized):
        return None
    return float(normalized)


__all__ = ["MENU_LINES", "MenuManager", "parse_amount"]
