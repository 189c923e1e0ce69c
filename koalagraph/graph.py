"""A small graph container with removable nodes, and shared algorithm plumbing."""

from __future__ import annotations

from typing import Iterator


class Graph:
    """Graph on node ids ``0..n-1``; nodes may be removed, ids are never reused."""

    def __init__(self, n=0, weighted=False, directed=False):
        self.weighted = weighted
        self.directed = directed
        self._out: list[dict[int, float] | None] = [{} for _ in range(n)]
        self._in: list[dict[int, float] | None] = [{} for _ in range(n)] if directed else []

    def _check(self, v):
        if not self.has_node(v):
            raise KeyError(f"node {v} does not exist")

    def add_edge(self, u, v, w=1.0):
        """Add the edge u-v (u->v if directed) with weight ``w``."""
        self._check(u)
        self._check(v)
        weight = w if self.weighted else 1.0
        self._out[u][v] = weight
        if self.directed:
            self._in[v][u] = weight
        else:
            self._out[v][u] = weight

    def increase_weight(self, u, v, w):
        """Add ``w`` to the weight of u-v, creating the edge if it is missing."""
        if self.has_edge(u, v):
            self.add_edge(u, v, self._out[u][v] + w)
        else:
            self.add_edge(u, v, w)

    def weight(self, u, v):
        self._check(u)
        return self._out[u].get(v, 0.0)

    def remove_node(self, v):
        self._check(v)
        for u in list(self._out[v]):
            if self.directed:
                del self._in[u][v]
            elif u != v:
                del self._out[u][v]
        if self.directed:
            for u in list(self._in[v]):
                del self._out[u][v]
            self._in[v] = None
        self._out[v] = None

    def has_node(self, v):
        return 0 <= v < len(self._out) and self._out[v] is not None

    def has_edge(self, u, v):
        return self.has_node(u) and self.has_node(v) and v in self._out[u]

    def degree(self, v):
        self._check(v)
        return len(self._out[v])

    def neighbors(self, v):
        self._check(v)
        return list(self._out[v])

    def in_neighbors(self, v):
        self._check(v)
        return list(self._in[v]) if self.directed else list(self._out[v])

    def ith_neighbor(self, v, i):
        """Return the ``i``-th neighbour of ``v`` in insertion order, or None."""
        neighbors = self.neighbors(v)
        return neighbors[i] if 0 <= i < len(neighbors) else None

    def nodes(self):
        return [v for v, adj in enumerate(self._out) if adj is not None]

    def weighted_edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield every edge once as ``(u, v, w)``."""
        for u in self.nodes():
            for v, w in self._out[u].items():
                if self.directed or v <= u:
                    yield u, v, w

    def edges(self) -> Iterator[tuple[int, int]]:
        for u, v, _ in self.weighted_edges():
            yield u, v

    def number_of_nodes(self):
        return sum(adj is not None for adj in self._out)

    def number_of_edges(self):
        return sum(1 for _ in self.weighted_edges())

    def upper_node_id_bound(self):
        return len(self._out)

    def copy(self):
        other = Graph(0, self.weighted, self.directed)
        other._out = [None if adj is None else dict(adj) for adj in self._out]
        other._in = [None if adj is None else dict(adj) for adj in self._in]
        return other


class Algorithm:
    """Base for algorithms that must be run before their results are read."""

    _has_run = False

    def run(self):
        """Compute the result and mark the algorithm as finished."""
        self._compute()
        self._has_run = True
        return self

    def _compute(self):
        raise NotImplementedError(f"{type(self).__name__} defines no computation")

    def has_finished(self):
        return self._has_run

    def assure_finished(self):
        if not self._has_run:
            raise RuntimeError("call run() before accessing results")


def to_complement(graph):
    """Return the complement of an undirected graph, keeping removed ids removed."""
    complement = Graph(graph.upper_node_id_bound(), False, False)
    for v in range(graph.upper_node_id_bound()):
        if graph.has_node(v):
            neighbors = set(graph.neighbors(v))
            for u in complement.nodes():
                if u < v and u not in neighbors:
                    complement.add_edge(u, v)
        else:
            complement.remove_node(v)
    return complement