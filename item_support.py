import math
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from fpg_errors import InvalidTransactionError


def check_weight(weight, name=""):
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidTransactionError(
            f"transaction {name!r}: weight must be a number, got {weight!r}"
        )
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidTransactionError(
            f"transaction {name!r}: weight must be positive, got {weight!r}"
        )


class FrequencyOrder:
    """Immutable snapshot of item supports, ordering items by descending
    support and then by item identifier."""

    __slots__ = ("_supports",)

    def __init__(self, supports: Mapping[str, float]) -> None:
        self._supports = MappingProxyType(dict(supports))

    def key(self, item):
        return (-self._supports.get(item, 0), item)

    def sort(self, items: Iterable[str]) -> List[str]:
        return sorted(items, key=self.key)

    def __contains__(self, item):
        return item in self._supports

    def __repr__(self):
        return f"FrequencyOrder({self.sort(self._supports)!r})"


class ItemSupportList:
    """Ordered items with a support value per item.

    The same structure holds a transaction (every item carries the
    transaction weight), an aggregate frequent-items table (total weight
    of the transactions containing each item) and a pattern being grown
    by the miner (every item carries the pattern's support).
    """

    def __init__(self, name="", items=(), supports=None, weight=1):
        self.name = name
        self.weight = weight
        self._items: List[str] = list(dict.fromkeys(items))
        self._supports: Dict[str, float] = {}
        if supports:
            for item in self._items:
                if item in supports:
                    self._supports[item] = supports[item]
        self._order: Optional[FrequencyOrder] = None

    @classmethod
    def transaction(cls, items, weight=1, name=""):
        check_weight(weight, name)
        unique = list(dict.fromkeys(items))
        return cls(name, unique, {item: weight for item in unique}, weight)

    @property
    def items(self) -> List[str]:
        return list(self._items)

    @property
    def supports(self) -> Dict[str, float]:
        return dict(self._supports)

    @property
    def order(self) -> FrequencyOrder:
        # Rebuilt from the supports on first use after any change.
        if self._order is None:
            self._order = FrequencyOrder(self._supports)
        return self._order

    def get_support(self, item):
        return self._supports.get(item)

    def add_support(self, item, delta):
        if item not in self._supports and item not in self._items:
            self._items.append(item)
        self._supports[item] = self._supports.get(item, 0) + delta
        self._order = None

    def set_support(self, item, value):
        if value is None:
            self._supports.pop(item, None)
            if item in self._items:
                self._items.remove(item)
        else:
            if item not in self._items:
                self._items.append(item)
            self._supports[item] = value
        self._order = None

    def sort_items(self, order: Optional[FrequencyOrder] = None) -> None:
        if order is None:
            order = self.order
        self._items = order.sort(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def __len__(self):
        return len(self._items)

    def __contains__(self, item):
        return item in self._items

    def __eq__(self, other):
        if not isinstance(other, ItemSupportList):
            return NotImplemented
        return self._items == other._items and self._supports == other._supports

    def __repr__(self):
        pairs = ", ".join(f"{item}:{self._supports.get(item)}" for item in self._items)
        return f"ItemSupportList({self.name!r}, [{pairs}])"


def prune_and_sort(transaction: ItemSupportList, frequent_items: ItemSupportList):
    """Drop the items of `transaction` that are not in `frequent_items` and
    sort the rest by the table's current frequency order."""
    order = frequent_items.order
    kept = [item for item in transaction if frequent_items.get_support(item) is not None]
    pruned = ItemSupportList(
        transaction.name + "pruned", kept, transaction.supports, transaction.weight
    )
    pruned.sort_items(order)
    return pruned


def check_transaction(transaction: ItemSupportList):
    """Every item of a transaction carries the transaction weight."""
    check_weight(transaction.weight, transaction.name)
    for item, support in transaction.supports.items():
        if support != transaction.weight:
            raise InvalidTransactionError(
                f"transaction {transaction.name!r}: item {item!r} has support "
                f"{support!r}, expected the transaction weight {transaction.weight!r}"
            )
