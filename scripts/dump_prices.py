#!/usr/bin/env python3
"""Print a freshly generated price catalog.

Useful to eyeball the shape of catalog prices (range, rounding,
currency) without starting anything else.

Usage
-----
::

    python scripts/dump_prices.py
    python scripts/dump_prices.py --size 30 --seed 7 --json

Options::

    --size N        Exclusive upper bound of the id range (default: 20)
    --currency CCY  Currency code (default: USD)
    --seed N        Seed the random source for a reproducible catalog
    --json          Output as machine-readable JSON
    -v, --verbose   Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyvehicles import PriceCatalog, PriceCatalogError  # noqa: E402
from pyvehicles._constants import CATALOG_SIZE, DEFAULT_CURRENCY  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dump a generated vehicle price catalog")
    parser.add_argument("--size", type=int, default=CATALOG_SIZE, help="exclusive upper bound of the id range")
    parser.add_argument("--currency", default=DEFAULT_CURRENCY, help="currency code")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible catalog")
    parser.add_argument("--json", action="store_true", help="output JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args()


def main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        catalog = PriceCatalog(size=args.size, currency=args.currency, rng=rng)
    except PriceCatalogError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    prices = [catalog.get_price(vehicle_id) for vehicle_id in catalog.vehicle_ids()]
    if args.json:
        print(json.dumps([price.model_dump(mode="json", by_alias=True) for price in prices], indent=2))
        return 0

    for price in prices:
        print(f"{price.vehicle_id:>4}  {price}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
