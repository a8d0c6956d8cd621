#!/usr/bin/env python3
"""Generate sample SPD payment strings.

Prints one SPD string per line, built from synthetic but checksum-valid
Czech or Slovak bank accounts.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from spd_payment.generators import PaymentGenerator
from spd_payment.logging import setup_logging
from spd_payment.serializers import PaymentSerializer

logger = logging.getLogger("spd_payment.scripts.generate_sample_payments")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate sample SPD payment strings")
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of payments to generate (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--country",
        choices=["CZ", "SK"],
        default="CZ",
        help="Country of the payee accounts (default: CZ)",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Log level")
    args = parser.parse_args()

    setup_logging(level=args.log_level)

    generator = PaymentGenerator(seed=args.seed)
    serializer = PaymentSerializer()

    start = time.perf_counter()
    for record in generator.generate_batch(args.count, country=args.country):
        print(serializer.serialize(record))
    elapsed = time.perf_counter() - start

    logger.info("Generated %d payments in %.3fs (seed=%d)", args.count, elapsed, args.seed)


if __name__ == "__main__":
    main()
