from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from config import config
from domain.rates import RateTable
from services.exchange_service import ExchangeService
from services.nbp_client import FetchError, NbpHttpClient
from services.table_parser import NbpXmlTableParser, ParseError
from services.text_decoder import CodecTextDecoder, DecodeError
from ui.menu import MenuManager

logger = logging.getLogger(__name__)


def build_exchange_service(*, url: str, timeout: float) -> ExchangeService:
    settings = config()
    return ExchangeService(
        fetcher=NbpHttpClient(timeout=timeout),
        decoder=CodecTextDecoder(settings.source_encoding, errors=settings.decode_errors),
        parser=NbpXmlTableParser(),
        url=url,
        base_currency=settings.base_currency,
    )


def load_table(
    service: ExchangeService,
    *,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> RateTable | None:
    """Fetch the table, offering a retry after each failure. ``None`` when the user gives up."""
    while True:
        output_fn(f"Fetching exchange rates from {service.url} ...")
        try:
            return service.fetch_table()
        except (FetchError, DecodeError, ParseError) as exc:
            logger.warning("Loading exchange table failed: %s", exc, exc_info=True)
            output_fn(f"Error: {exc}")

        try:
            answer = input_fn("Retry? [y/N]: ")
        except EOFError:
            return None
        if answer.strip().lower() not in ("y", "yes"):
            return None


def main(argv: Sequence[str] | None = None) -> int:
    settings = config()
    parser = argparse.ArgumentParser(description="Convert currencies using the current NBP exchange table.")
    parser.add_argument("--url", default=settings.table_url, help="Exchange table XML URL.")
    parser.add_argument("--timeout", type=float, default=settings.fetch_timeout, help="Fetch timeout in seconds.")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: WARNING).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")

    try:
        service = build_exchange_service(url=args.url, timeout=args.timeout)
        table = load_table(service)
    except Exception as exc:  # noqa: BLE001
        logger.error("Startup failed: %s", exc, exc_info=True)
        print(f"Error: {exc}")
        return 1
    if table is None:
        return 1

    MenuManager(table, base_currency=service.base_currency).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
