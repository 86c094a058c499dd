from __future__ import annotations

import math
from datetime import date

from pydantic import BaseModel, ConfigDict, model_validator

BASE_CURRENCY = "PLN"


class Rate(BaseModel):
    """Mid rate of one currency: units of base currency per one unit of ``code``."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str = ""
    rate: float

    @model_validator(mode="after")
    def _validate_rate(self) -> Rate:
        if not self.code:
            raise ValueError("Rate.code must be non-empty")
        if not math.isfinite(self.rate) or self.rate <= 0:
            raise ValueError(f"Rate.rate must be a positive number, got {self.rate!r}")
        return self

    def __str__(self) -> str:
        return f"[{self.code}] {self.name}: rate={self.rate:.4f}"


class RateTable(BaseModel):
    """Snapshot of a single published exchange table.

    Rates keep document order. Codes are not required to be unique; lookups
    return the first match.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    published_at: date
    rates: tuple[Rate, ...] = ()

    def lookup(self, code: str) -> Rate | None:
        for rate in self.rates:
            if rate.code == code:
                return rate
        return None

    def codes(self) -> list[str]:
        return [rate.code for rate in self.rates]

    def sorted_by_code(self) -> list[Rate]:
        return sorted(self.rates, key=lambda r: r.code)


def lookup(table: RateTable, code: str) -> Rate | None:
    return table.lookup(code)


__all__ = ["BASE_CURRENCY", "Rate", "RateTable", "lookup"]
