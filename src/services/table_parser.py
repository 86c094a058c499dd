from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from pydantic import ValidationError

from domain.rates import Rate, RateTable

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"\d+(\.\d+)?")


class ParseError(RuntimeError):
    pass


@dataclass(frozen=True)
class NbpFeedFields:
    """Element names of an exchange-table document."""

    table_id: str = "numer_tabeli"
    published_at: str = "data_publikacji"
    position: str = "pozycja"
    code: str = "kod_waluty"
    name: str = "nazwa_waluty"
    rate: str = "kurs_sredni"


class TableParser(Protocol):
    def parse(self, text: str) -> RateTable: ...


class NbpXmlTableParser(TableParser):
    """Parses an NBP-style XML table into a ``RateTable``.

    Parsing is all-or-nothing: one bad position invalidates the whole document.
    """

    def __init__(self, fields: NbpFeedFields | None = None) -> None:
        self.fields = fields or NbpFeedFields()

    def parse(self, text: str) -> RateTable:
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise ParseError(f"Document is not well-formed XML: {exc}") from exc

        table_id = _child_text(root, self.fields.table_id)
        published_at = self._parse_date(_child_text(root, self.fields.published_at))

        rates: list[Rate] = []
        for index, position in enumerate(root.findall(self.fields.position), start=1):
            rates.append(self._parse_position(position, index))

        logger.debug("Parsed table %s with %d positions", table_id or "<no id>", len(rates))
        return RateTable(id=table_id, published_at=published_at, rates=tuple(rates))

    def _parse_date(self, raw: str) -> date:
        if not raw:
            raise ParseError(f"Missing <{self.fields.published_at}> element")
        try:
            return date.fromisoformat(raw)
        except ValueError as exc:
            raise ParseError(f"Unparsable publication date: {raw!r}") from exc

    def _parse_position(self, position: ET.Element, index: int) -> Rate:
        code = _child_text(position, self.fields.code)
        name = _child_text(position, self.fields.name)
        raw_rate = _child_text(position, self.fields.rate)
        if not code:
            raise ParseError(f"Position {index} has no currency code")

        value = parse_rate(raw_rate)
        if value is None:
            raise ParseError(f"Position {index} ({code}) has invalid rate {raw_rate!r}")

        try:
            return Rate(code=code, name=name, rate=value)
        except ValidationError as exc:
            raise ParseError(f"Position {index} ({code}) is invalid") from exc


def parse_rate(raw: str) -> float | None:
    """Parse a decimal string that may use a comma separator; ``None`` if not a positive number."""
    normalized = raw.replace(",", ".")
    if not _DECIMAL_RE.fullmatch(normalized):
        return None
    value = float(normalized)
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def parse(text: str) -> RateTable:
    return NbpXmlTableParser().parse(text)


def _child_text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


__all__ = ["NbpFeedFields", "NbpXmlTableParser", "ParseError", "TableParser", "parse", "parse_rate"]
