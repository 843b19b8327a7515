#!/usr/bin/env python3
"""Local runner for orderflow.

Run this script to push a demo batch of orders through the pipeline
without starting the API server. Useful for development and debugging.

Usage:
    python scripts/local_run.py                      # Static classification
    python scripts/local_run.py --data 30            # Static classification with data=30
    python scripts/local_run.py --http               # Use CLASSIFICATION_API_URL
    python scripts/local_run.py --storage out/       # Export type A orders to out/
"""

import argparse
import logging
from decimal import Decimal
from pathlib import Path

from orderflow.clients import ClassificationClient, HTTPClassificationClient, StaticClassificationClient
from orderflow.core.models import Order
from orderflow.core.processor import OrderProcessor
from orderflow.repositories import InMemoryOrderRepository
from orderflow.sinks import CSVFileSink

DEMO_USER_ID = 1

DEMO_ORDERS = [
    Order(id=1, type="A", amount=Decimal("250"), flag=True),
    Order(id=2, type="A", amount=Decimal("90"), flag=False),
    Order(id=3, type="B", amount=Decimal("80"), flag=False),
    Order(id=4, type="B", amount=Decimal("150"), flag=True),
    Order(id=5, type="C", amount=Decimal("300"), flag=True),
    Order(id=6, type="C", amount=None, flag=None),
    Order(id=7, type="X", amount=Decimal("500"), flag=False),
]


def build_client(args: argparse.Namespace) -> ClassificationClient:
    if args.http:
        return HTTPClassificationClient()
    return StaticClassificationClient(status=args.status, data=args.data)


def run(args: argparse.Namespace) -> None:
    repository = InMemoryOrderRepository()
    for order in DEMO_ORDERS:
        repository.add_order(DEMO_USER_ID, order)

    processor = OrderProcessor(
        repository=repository,
        classification_client=build_client(args),
        sink=CSVFileSink(args.storage),
    )

    orders = processor.process_all(DEMO_USER_ID)

    print(f"\n{'='*60}")
    print(f"Processed {len(orders)} orders for user {DEMO_USER_ID}")
    print(f"{'='*60}\n")
    print(f"{'ID':>4}  {'Type':<6}{'Amount':>8}  {'Flag':<6}{'Status':<15}{'Priority'}")
    for order in orders:
        print(
            f"{order.id!s:>4}  {order.type or '-':<6}{order.amount or '-'!s:>8}  "
            f"{str(order.is_flagged).lower():<6}{order.status.value:<15}{order.priority.value}"
        )

    exports = sorted(Path(args.storage).glob("orders_type_A_*.csv"))
    if exports:
        print(f"\nCSV exports in {args.storage}:")
        for path in exports:
            print(f"  {path.name}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run orderflow on a demo batch")
    parser.add_argument("--http", action="store_true", help="Use the HTTP classification client")
    parser.add_argument("--status", default="success", help="Static classification status")
    parser.add_argument("--data", type=Decimal, default=Decimal("60"), help="Static classification data")
    parser.add_argument("--storage", type=Path, default=Path("storage"), help="Export directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    run(args)


if __name__ == "__main__":
    main()
