# flake8: noqa E402
# Run via uv to load project deps, e.g.:
# uv run scripts/nbp_table_probe.py --convert EUR USD 100
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Ensure the src directory is importable when the script is invoked via uv/python directly.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from config import config
from main import build_exchange_service
from ui.menu import parse_amount


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch the NBP exchange table and dump it as JSON.")
    parser.add_argument("--url", default=None, help="Exchange table XML URL (default: configured table_url).")
    parser.add_argument(
        "--convert",
        nargs=3,
        metavar=("FROM", "TO", "AMOUNT"),
        default=None,
        help="Also convert AMOUNT from FROM to TO using the fetched table.",
    )
    return parser.parse_args()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    args = parse_args()

    settings = config()
    service = build_exchange_service(url=args.url or settings.table_url, timeout=settings.fetch_timeout)
    table = service.fetch_table()

    payload: dict[str, Any] = {
        "table_id": table.id,
        "published_at": table.published_at.isoformat(),
        "base": service.base_currency,
        "rates": [{"code": r.code, "name": r.name, "rate": r.rate} for r in table.rates],
    }
    if args.convert:
        from_code, to_code, raw_amount = args.convert
        amount = parse_amount(raw_amount)
        if amount is None:
            raise SystemExit(f"Invalid amount: {raw_amount!r}")
        payload["conversion"] = {
            "from": from_code.upper(),
            "to": to_code.upper(),
            "amount": amount,
            "result": service.convert(from_code, to_code, amount),
        }
    print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
