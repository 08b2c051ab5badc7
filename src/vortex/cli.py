"""
Vortex Matrix CLI

Usage:
  python -m src.vortex 1.085 1.08
  python -m src.vortex 1.085 1.08 --json
  python -m src.vortex 1.085 1.08 --log-level DEBUG
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from src.core.contracts import ContractViolation, dump_vortex_matrix
from src.vortex.engine import InvalidRangeError, compute_matrix
from src.vortex.report import print_results

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vortex-matrix",
        description="Pivot and intersection levels of the Vortex Matrix for a price range",
    )
    parser.add_argument("price_high", type=float, help="Highest price of the range")
    parser.add_argument("price_low", type=float, help="Lowest price of the range")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a table",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Точка входа CLI.

    Returns:
        Exit code: 0 — успех, 2 — невалидные границы диапазона,
        3 — результат нарушает контракт vortex_matrix
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    try:
        matrix = compute_matrix(args.price_high, args.price_low)
    except InvalidRangeError as e:
        logger.error("Invalid price range: %s", e)
        return 2

    try:
        payload = dump_vortex_matrix(matrix)
    except ContractViolation as e:
        logger.error("Result rejected: %s", e)
        return 3

    logger.info(
        "%d levels: %d pivots, %d intersections",
        len(matrix.results), len(matrix.pivots()), len(matrix.intersections()),
    )

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print_results(matrix.results, matrix.price_high, matrix.price_low)

    return 0


if __name__ == "__main__":
    sys.exit(main())
