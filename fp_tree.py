from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from item_support import ItemSupportList, prune_and_sort

ROOT = 0


class FPNode:
    __slots__ = ("item", "count", "parent", "children")

    def __init__(self, item, count=0, parent: Optional[int] = None):
        self.item = item
        self.count = count
        self.parent = parent
        # item -> index of the child node in the tree's arena
        self.children: Dict[str, int] = {}

    def increment(self, count=1):
        self.count += count

    def __repr__(self):
        return f"FPNode({self.item!r}, {self.count})"


class FPTree:
    """Prefix tree over frequency-sorted transactions.

    Nodes live in `nodes` and refer to each other by index; `header_table`
    maps every item to the indices of its occurrences in insertion order.
    """

    def __init__(self, frequent_items: Optional[ItemSupportList] = None):
        self.nodes: List[FPNode] = [FPNode(None)]
        self.header_table: Dict[str, List[int]] = defaultdict(list)
        self.frequent_items = (
            frequent_items if frequent_items is not None else ItemSupportList("Frequent Items")
        )

    @classmethod
    def build(cls, transactions, frequent_items: ItemSupportList):
        tree = cls(frequent_items)
        for transaction in transactions:
            path = prune_and_sort(transaction, frequent_items)
            tree.insert(path.items, transaction.weight)
        return tree

    @property
    def root(self) -> FPNode:
        return self.nodes[ROOT]

    @property
    def node_count(self):
        return len(self.nodes) - 1

    def node(self, index) -> FPNode:
        return self.nodes[index]

    def is_empty(self):
        return not self.root.children

    def insert(self, items, weight=1, node=ROOT):
        if not items:
            return
        item = items[0]
        current = self.nodes[node]
        child = current.children.get(item)
        if child is None:
            child = len(self.nodes)
            self.nodes.append(FPNode(item, 0, node))
            current.children[item] = child
            self.header_table[item].append(child)
        self.nodes[child].increment(weight)
        self.insert(items[1:], weight, child)

    def has_one_branch(self):
        return all(len(node.children) <= 1 for node in self.nodes)

    def single_branch(self) -> Tuple[List[str], List[float]]:
        """Items and counts from the root down to the leaf of a tree that
        has one branch."""
        items, counts = [], []
        node = self.root
        while node.children:
            node = self.nodes[next(iter(node.children.values()))]
            items.append(node.item)
            counts.append(node.count)
        return items, counts

    def headers_descending(self) -> List[str]:
        return self.frequent_items.order.sort(self.frequent_items.items)

    def item_support(self, item):
        return sum(self.nodes[index].count for index in self.header_table.get(item, ()))

    def _prefix(self, index):
        path = []
        parent = self.nodes[index].parent
        while parent is not None and parent != ROOT:
            path.append(self.nodes[parent].item)
            parent = self.nodes[parent].parent
        path.reverse()
        return path

    def conditional_pattern_base(self, item) -> List[ItemSupportList]:
        """Prefix paths of every occurrence of `item`, each weighted by that
        occurrence's count.

        Occurrences are nodes, not transactions: for root-x-y-z(3) and
        root-x-y-w(2) the shared `y` node has count 5, so the base of `y` is
        a single [x] of weight 5 while `z` and `w` get [x, y] weighted 3 and 2.
        """
        base = []
        for index in self.header_table.get(item, ()):
            path = self._prefix(index)
            if path:
                base.append(
                    ItemSupportList.transaction(path, self.nodes[index].count, name=item)
                )
        return base

    def patterns_ending_with(self, item) -> List[ItemSupportList]:
        patterns = []
        for index in self.header_table.get(item, ()):
            path = self._prefix(index) + [item]
            patterns.append(
                ItemSupportList.transaction(path, self.nodes[index].count, name=item)
            )
        return patterns

    def dump(self, node=ROOT, level=0):
        current = self.nodes[node]
        label = "null" if current.item is None else f"{current.item}:{current.count}"
        lines = ["  " * level + label]
        for child in current.children.values():
            lines.append(self.dump(child, level + 1))
        return "\n".join(lines)
