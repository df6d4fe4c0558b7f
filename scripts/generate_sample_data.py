#!/usr/bin/env python3
"""Fill a data directory with generated cars and customers.

Opens (and on first run bootstraps) the text-file store in the given
directory, inserts generated records through the repository, and prints
the resulting entity counts. Useful for trying the store with more data
than the built-in samples.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from carloan_store.config import StoreConfig
from carloan_store.generators import CarGenerator, CustomerGenerator
from carloan_store.logging import setup_logging
from carloan_store.store import CarLoanRepository


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fill a data directory with generated records.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Store directory (default: CARLOAN_DATA_DIR or ~/.vismera_data)",
    )
    parser.add_argument("--cars", type=int, default=10, help="Cars to generate")
    parser.add_argument("--customers", type=int, default=10, help="Customers to generate")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = StoreConfig.from_env()
    if args.data_dir is not None:
        config.data_dir = args.data_dir.expanduser()
    setup_logging(args.log_level or config.log_level, config.log_format, config.data_dir)

    repository = CarLoanRepository.open(config)

    print(f"\nStore: {repository.data_dir}")
    print("\n1. Generating cars...")
    car_ids = [repository.insert_car(car) for car in CarGenerator(seed=args.seed).generate_batch(args.cars)]
    if car_ids:
        print(f"   ids {car_ids[0]}..{car_ids[-1]}")

    print("2. Generating customers...")
    customer_ids = [
        repository.insert_customer(customer)
        for customer in CustomerGenerator(seed=args.seed).generate_batch(args.customers)
    ]
    if customer_ids:
        print(f"   ids {customer_ids[0]}..{customer_ids[-1]}")

    print("\nSummary:")
    for entity_type, count in repository.summary().items():
        print(f"  {entity_type}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
