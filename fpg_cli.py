import argparse
import logging
import sys

import pandas

import fpg_config
from fp_growth import frequent_items, mine
from fpg_errors import FPGrowthError
from transactions import (
    frequent_items_frame,
    min_support_count,
    patterns_by_level,
    patterns_frame,
    read_transactions,
)

logger = logging.getLogger("fpg")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="fpg-mine", description="Mine frequent itemsets with FP-Growth."
    )
    parser.add_argument("file", help="Excel or CSV file with one transaction per row")
    threshold = parser.add_mutually_exclusive_group()
    threshold.add_argument(
        "--min-support",
        type=int,
        default=None,
        help=f"Minimum support count (default {fpg_config.MIN_SUPPORT})",
    )
    threshold.add_argument(
        "--min-support-percent",
        type=float,
        default=None,
        help="Minimum support as a percentage of the transactions",
    )
    parser.add_argument("--items-column", default=fpg_config.ITEMS_COLUMN)
    parser.add_argument("--weight-column", default=fpg_config.WEIGHT_COLUMN)
    parser.add_argument("--separator", default=fpg_config.ITEM_SEPARATOR)
    parser.add_argument("--log-level", default=fpg_config.LOG_LEVEL)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=fpg_config.LOG_FORMAT)

    try:
        transactions = read_transactions(
            args.file,
            items_column=args.items_column,
            weight_column=args.weight_column,
            separator=args.separator,
        )
        if args.min_support_percent is not None:
            min_support = min_support_count(args.min_support_percent, len(transactions))
        elif args.min_support is not None:
            min_support = args.min_support
        else:
            min_support = fpg_config.MIN_SUPPORT
        logger.info("minimum support count: %s", min_support)

        patterns = mine(transactions, min_support)
        for level, itemsets in patterns_by_level(patterns).items():
            logger.info("L%d: %d frequent itemsets", level, len(itemsets))
    except (FPGrowthError, OSError) as e:
        logger.error("%s", e)
        return 2

    with pandas.option_context("display.max_rows", None, "display.width", 120):
        print("Frequent Items (L1):")
        print(frequent_items_frame(frequent_items(transactions, min_support)).to_string(index=False))
        print()
        print("Frequent Itemsets:")
        print(patterns_frame(patterns).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
