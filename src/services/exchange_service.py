from __future__ import annotations

import logging

from domain.converter import convert
from domain.rates import BASE_CURRENCY, RateTable

from .nbp_client import ByteFetcher
from .table_parser import TableParser
from .text_decoder import TextDecoder

logger = logging.getLogger(__name__)


class ExchangeService:
    """Fetch -> decode -> parse pipeline for a single exchange-table URL."""

    def __init__(
        self,
        *,
        fetcher: ByteFetcher,
        decoder: TextDecoder,
        parser: TableParser,
        url: str,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        if fetcher is None or decoder is None or parser is None:
            msg = "fetcher, decoder and parser must be provided"
            raise ValueError(msg)
        if not url:
            msg = "url must be provided"
            raise ValueError(msg)

        self.fetcher = fetcher
        self.decoder = decoder
        self.parser = parser
        self.url = url
        self.base_currency = base_currency.upper()
        self.table: RateTable | None = None

    def fetch_table(self) -> RateTable:
        data = self.fetcher.fetch(self.url)
        text = self.decoder.decode(data)
        table = self.parser.parse(text)
        logger.info(
            "Loaded exchange table %s published %s with %d rates",
            table.id,
            table.published_at.isoformat(),
            len(table.rates),
        )
        self.table = table
        return table

    def convert(self, from_code: str, to_code: str, amount: float) -> float:
        if self.table is None:
            msg = "No exchange table loaded; call fetch_table() first"
            raise RuntimeError(msg)
        return convert(self.table, from_code, to_code, amount, base_currency=self.base_currency)


__all__ = ["ExchangeService"]
