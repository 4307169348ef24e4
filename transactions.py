import logging
import math
from collections import defaultdict
from pathlib import Path

import pandas

import fpg_config
from fpg_errors import TransactionFormatError
from item_support import ItemSupportList

logger = logging.getLogger(__name__)


def _split_items(value, separator):
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return []
    items = (item.strip() for item in str(value).split(separator))
    return list(dict.fromkeys(item for item in items if item))


def transactions_from_frame(
    frame: pandas.DataFrame,
    items_column=fpg_config.ITEMS_COLUMN,
    weight_column=fpg_config.WEIGHT_COLUMN,
    separator=fpg_config.ITEM_SEPARATOR,
):
    """One transaction per row, items given as a delimited string."""
    if items_column not in frame.columns:
        raise TransactionFormatError(
            f"no {items_column!r} column, found {list(frame.columns)}"
        )
    has_weights = weight_column is not None and weight_column in frame.columns
    transactions = []
    for position, (_, row) in enumerate(frame.iterrows(), start=1):
        weight = row[weight_column] if has_weights else 1
        if has_weights and pandas.isna(weight):
            weight = 1
        transactions.append(
            ItemSupportList.transaction(
                _split_items(row[items_column], separator),
                weight=weight.item() if hasattr(weight, "item") else weight,
                name=f"T{position}",
            )
        )
    return transactions


def read_transactions(path, **kwargs):
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in (".xlsx", ".xls"):
        frame = pandas.read_excel(path)
    elif suffix == ".csv":
        frame = pandas.read_csv(path)
    else:
        raise TransactionFormatError(f"unsupported transaction file type: {path.name}")
    logger.info("read %d rows from %s", len(frame), path)
    return transactions_from_frame(frame, **kwargs)


def transactions_from_usage(usage):
    """Transactions from a mapping of client -> items it uses, e.g. a class
    and the methods of another class that it calls."""
    return [
        ItemSupportList.transaction(items, name=str(client))
        for client, items in usage.items()
    ]


def min_support_count(percent, total):
    return math.ceil(percent * total / 100)


def frequent_items_frame(table: ItemSupportList) -> pandas.DataFrame:
    items = table.order.sort(table.items)
    return pandas.DataFrame(
        {"item": items, "support": [table.get_support(item) for item in items]},
        columns=["item", "support"],
    )


def patterns_by_level(patterns):
    levels = defaultdict(list)
    for pattern in patterns:
        levels[pattern.level].append(pattern)
    return dict(sorted(levels.items()))


def patterns_frame(patterns) -> pandas.DataFrame:
    frame = pandas.DataFrame(
        [
            {"level": f"L{pattern.level}", "itemset": pattern.items, "support": pattern.support}
            for pattern in patterns
        ],
        columns=["level", "itemset", "support"],
    )
    if frame.empty:
        return frame
    frame["_size"] = frame["itemset"].map(len)
    frame = frame.sort_values(
        ["_size", "support"], ascending=[True, False], kind="stable"
    )
    return frame.drop(columns="_size").reset_index(drop=True)
