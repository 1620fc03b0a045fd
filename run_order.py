from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from decimal import Decimal
from typing import List, Optional, Tuple

from order_pipeline.catalog import default_catalog
from order_pipeline.config import DEFAULT_MAX_DELAY, PipelineConfig
from order_pipeline.models import Order, to_decimal
from order_pipeline.pipeline import OrderPipeline


def parse_item(raw: str) -> Tuple[str, int]:
    name, sep, qty = raw.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=QTY, got {raw!r}")
    try:
        return name, int(qty)
    except ValueError:
        raise argparse.ArgumentTypeError(f"quantity must be an integer, got {qty!r}") from None


def parse_amount(raw: str) -> Decimal:
    try:
        return to_decimal(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run one order through inventory, payment and shipping.")
    p.add_argument("--item", dest="items", action="append", type=parse_item, metavar="NAME=QTY",
                   help="Order line, may be repeated (default: sunglasses=1 bags=2)")
    p.add_argument("--giftcard", type=parse_amount, default=Decimal("390.82"))
    p.add_argument("--order-id", type=str, default=None)
    p.add_argument("--max-delay", type=float, default=DEFAULT_MAX_DELAY, help="Upper bound of the per-stage delay, seconds")
    p.add_argument("--no-delay", action="store_true")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    items = args.items or [("sunglasses", 1), ("bags", 2)]
    try:
        order = Order.create(items, args.giftcard, order_id=args.order_id)
        config = PipelineConfig(
            max_delay=0.0 if args.no_delay else args.max_delay,
            rng=random.Random(args.seed),
        )
    except ValueError as e:
        p.error(str(e))

    pipeline = OrderPipeline(default_catalog(), config)
    result = asyncio.run(pipeline.run(order))

    print("\n=== RESULT ===")
    print(result.message)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
