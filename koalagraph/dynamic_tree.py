"""Dynamic forest over node ids, used to push flow along tree paths."""

from __future__ import annotations

from koalagraph.dyn_tree import DynItem

_CAPACITY_LIMIT = 2**31 - 2


class DynamicTree:
    """Forest on nodes ``0..n-1``; a non-root node holds the residual capacity
    of the edge to its parent."""

    def __init__(self):
        self._items: list[DynItem] = []
        self._ids: dict[DynItem, int] = {}
        self._children: list[set[int]] = []

    def initialize(self, n):
        """Reset to ``n`` single-node trees, each with value 0."""
        self._items = [DynItem(0) for _ in range(n)]
        self._ids = {item: v for v, item in enumerate(self._items)}
        self._children = [set() for _ in range(n)]

    def _id(self, item):
        return None if item is None else self._ids[item]

    def find_parent(self, v):
        """Return the parent of ``v``, or None for a root."""
        return self._id(self._items[v].find_father())

    def find_root(self, v):
        return self._id(self._items[v].find_root())

    def find_children(self, v):
        """Return a copy of the set of children of ``v``."""
        return set(self._children[v])

    def get_value(self, v):
        return self._items[v].find_value()

    def add_value(self, v, delta):
        """Add ``delta`` to every node on the path from ``v`` up to, not including, its root."""
        self._items[v].add_value(delta)

    def link(self, u, v, capacity):
        """Make the root ``u`` a child of ``v`` through an edge of ``capacity``."""
        self._items[u].link(self._items[v], capacity)
        self._children[v].add(u)

    def cut(self, u, v):
        """Remove the edge between ``u`` and its parent ``v``."""
        self._items[u].cut()
        self._children[v].discard(u)

    def find_saturated_edge(self, v):
        """Return the nearest edge ``(x, parent)`` above ``v`` with zero capacity,
        or ``(None, None)`` if the path to the root has none."""
        start = self._items[v]
        bottleneck = start.find_bottleneck(0)
        root = start.find_root()
        if bottleneck is not root:
            return self._ids[bottleneck], self._id(bottleneck.find_father())
        return None, None

    def get_minimum_path_residue_capacity(self, v):
        """Return the smallest capacity on the path from ``v`` to its root,
        capped at ``2**31 - 2`` (the cap is returned for a root)."""
        low, high = 0, _CAPACITY_LIMIT
        start = self._items[v]
        root = start.find_root()
        while low < high:
            mid = (low + high) // 2
            if start.find_bottleneck(mid) is root:
                low = mid + 1
            else:
                high = mid
        return low