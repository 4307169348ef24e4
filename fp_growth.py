import logging
import math
import numbers
from typing import Iterable, List, NamedTuple, Tuple

from fp_tree import FPTree
from fpg_errors import InvalidSupportError, InvalidTransactionError
from item_support import ItemSupportList, check_transaction

logger = logging.getLogger(__name__)


class Pattern(NamedTuple):
    items: Tuple[str, ...]
    support: float

    @property
    def itemset(self):
        return frozenset(self.items)

    @property
    def level(self):
        return len(self.items)


def _check_min_support(min_support):
    if isinstance(min_support, bool) or not isinstance(min_support, numbers.Real):
        raise InvalidSupportError(f"minimum support must be a number, got {min_support!r}")
    if math.isnan(min_support) or min_support < 0:
        raise InvalidSupportError(f"minimum support must be >= 0, got {min_support!r}")


def as_transactions(transactions) -> List[ItemSupportList]:
    """Accept ItemSupportList transactions or plain item sequences (weight 1)."""
    result = []
    for index, transaction in enumerate(transactions, start=1):
        if isinstance(transaction, ItemSupportList):
            check_transaction(transaction)
            result.append(transaction)
        elif isinstance(transaction, str):
            raise InvalidTransactionError(
                f"transaction {index} is a string, expected a sequence of items"
            )
        else:
            result.append(ItemSupportList.transaction(transaction, name=f"T{index}"))
    return result


def pattern_support(pattern: ItemSupportList):
    items = pattern.items
    return pattern.get_support(items[0]) if items else None


def item_frequencies(transactions: Iterable[ItemSupportList]) -> ItemSupportList:
    """Total weight of the transactions containing each item, most frequent first."""
    table = ItemSupportList("Frequent Items")
    for transaction in transactions:
        for item in transaction:
            support = transaction.get_support(item)
            if support is None:
                support = transaction.weight
            table.add_support(item, support)
    table.sort_items()
    return table


def frequent_items(transactions, min_support) -> ItemSupportList:
    table = item_frequencies(transactions)
    # Items are sorted by descending support, so stop at the first survivor.
    for item in reversed(table.items):
        if table.get_support(item) >= min_support:
            break
        table.set_support(item, None)
    return table


def build_fp_tree(transactions, min_support) -> FPTree:
    transactions = list(transactions)
    table = frequent_items(transactions, min_support)
    return FPTree.build(transactions, table)


def generate_pattern_b(item, support, pattern_a: ItemSupportList) -> ItemSupportList:
    """`pattern_a` extended with `item`, every member carrying `support`."""
    pattern_b = ItemSupportList(f"{item}{pattern_a.name}", pattern_a.items)
    for member in pattern_a:
        pattern_b.set_support(member, support)
    pattern_b.set_support(item, support)
    return pattern_b


def generate_combinations(prefix, to_do, combinations=None):
    """Append every non-empty ordered subsequence of `to_do` to `prefix`."""
    if combinations is None:
        combinations = []
    for i, item in enumerate(to_do):
        combination = list(prefix) + [item]
        combinations.append(combination)
        if len(to_do) > 1:
            generate_combinations(combination, to_do[i + 1:], combinations)
    return combinations


def single_branch_patterns(tree: FPTree, pattern_a: ItemSupportList):
    items, counts = tree.single_branch()
    counts_by_item = dict(zip(items, counts))
    patterns = []
    for combination in generate_combinations([], items):
        # Counts shrink towards the leaf, so this is the deepest chosen node.
        support = min(counts_by_item[item] for item in combination)
        members = combination + pattern_a.items
        patterns.append(
            ItemSupportList(
                "combo" + "".join(map(str, combination)) + pattern_a.name,
                members,
                {member: support for member in members},
            )
        )
    return patterns


def _grow(tree: FPTree, item, pattern_a, min_support, patterns):
    support = tree.frequent_items.get_support(item)
    pattern_b = generate_pattern_b(item, support, pattern_a)
    patterns.append(pattern_b)

    base = tree.conditional_pattern_base(item)
    if not base:
        return
    conditional_tree = build_fp_tree(base, min_support)
    if conditional_tree.is_empty():
        return
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "conditional tree for %s:\n%s", pattern_b.items, conditional_tree.dump()
        )
    patterns.extend(fp_growth(conditional_tree, pattern_b, min_support))


def fp_growth(tree: FPTree, pattern_a: ItemSupportList, min_support) -> List[ItemSupportList]:
    """Frequent patterns that extend `pattern_a`, mined from its conditional
    tree. `pattern_a` itself is not part of the result."""
    if tree.has_one_branch():
        return single_branch_patterns(tree, pattern_a)

    patterns = []
    # Least frequent first
    for item in reversed(tree.headers_descending()):
        _grow(tree, item, pattern_a, min_support, patterns)
    return patterns


def mine(transactions, min_support) -> List[Pattern]:
    _check_min_support(min_support)
    transactions = as_transactions(transactions)
    tree = build_fp_tree(transactions, min_support)
    headers = tree.headers_descending()
    logger.info(
        "%d transactions, %d frequent items, %d tree nodes",
        len(transactions),
        len(headers),
        tree.node_count,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("FP-tree:\n%s", tree.dump())

    patterns = []
    for item in reversed(headers):
        _grow(tree, item, ItemSupportList(), min_support, patterns)

    order = tree.frequent_items.order
    result = [
        Pattern(tuple(order.sort(pattern.items)), pattern_support(pattern))
        for pattern in patterns
    ]
    logger.info("%d frequent patterns at minimum support %s", len(result), min_support)
    return result
