"""Edge designation game for the King-Rao-Tarjan maximum flow algorithm.

The game is played on a layered bipartite graph. A left vertex ``(u, k)``
has an edge to a right vertex ``(v, k - 1)`` for every graph edge ``u -> v``
and every level ``1 <= k < 2n``. The designator keeps one designated edge for
each left vertex, and the adversary removes edges and whole right vertices.
Left vertices of degree at least ``l`` are handled by the ratio-level
strategy, which keeps any single right vertex from collecting too many
designations.
"""

from __future__ import annotations


class KRTEdgeDesignator:
    """Keeps a designated outgoing edge for every left vertex of the game."""

    def __init__(self, l=16, x=2.0, r0=0.25, t=8):
        if t < 1:
            raise ValueError("the number of ratio levels must be positive")
        if x <= 0:
            raise ValueError("x must be positive")
        self._l = l
        self._x = x
        self._r0 = r0
        self._t = t
        self._threshold = l / (88.0 * x)
        self._ratios = [r0]
        for _ in range(1, t):
            self._ratios.append((1 + 1.0 / x) * self._ratios[-1])

        self._max_k = 0
        self._u: list[list[int]] = []
        self._v: list[list[int]] = []
        self._u_neighbors: list[list[set[int]]] = []
        self._deg_u: list[int] = []
        self._designated: list[int] = []
        self._rl: list[int] = []
        self._erl: list[int] = []
        self._u_prim: set[int] = set()
        self._v_prim: set[int] = set()

    def _encode(self, i, k):
        return i * self._max_k + k

    def _decode(self, i):
        return i // self._max_k if i >= 0 else None

    def initialize(self, graph):
        """Build the game for ``graph`` and designate an edge for every left vertex."""
        n = graph.number_of_nodes()
        self._max_k = 2 * n
        size = (n + 1) * self._max_k
        self._u = [[] for _ in range(size)]
        self._v = [[] for _ in range(size)]
        self._designated = [-1] * size
        self._rl = [0] * size
        self._erl = [0] * size

        for a, b in graph.edges():
            for k in range(1, self._max_k):
                left, right = self._encode(a, k), self._encode(b, k - 1)
                self._u[left].append(right)
                self._v[right].append(left)

        self._u_neighbors = []
        self._deg_u = []
        for adjacent in self._u:
            levels = [set() for _ in range(self._t + 1)]
            levels[0] = set(adjacent)
            self._u_neighbors.append(levels)
            self._deg_u.append(len(adjacent))

        self._u_prim = {i for i, adjacent in enumerate(self._u) if len(adjacent) >= self._l}
        self._v_prim = {i for i, adjacent in enumerate(self._v) if len(adjacent) >= self._l}

        for i in range(size):
            self._designate_edge(i)

    def _indexed_u(self, k):
        return {
            u for u in self._u_prim
            if self._designated[u] in self._v_prim and self._rl[self._designated[u]] >= k
        }

    def _indexed_v(self, k):
        return {v for v in self._v_prim if self._rl[v] >= k}

    def _update_rl(self, v):
        chosen = sum(
            1 for u in self._v[v] if self._designated[u] == v and u in self._u_prim
        )
        ratio = chosen / len(self._v[v])
        if v not in self._v_prim or ratio < self._r0:
            self._rl[v] = 0
            return
        for i in reversed(range(self._t)):
            if ratio >= self._ratios[i]:
                self._rl[v] = i + 1
                return

    def _update_erl(self, v):
        self._erl[v] = self._rl[v]
        for u in self._v[v]:
            if u not in self._u_prim:
                continue
            levels = self._u_neighbors[u]
            for level in levels:
                if v in level:
                    level.discard(v)
                    levels[self._erl[v]].add(v)
                    break

    def _remove_edge(self, u, v):
        if v < 0:
            return
        for level in self._u_neighbors[u]:
            if v in level:
                level.discard(v)
                self._deg_u[u] -= 1
                break
        if self._designated[u] == v:
            self._designated[u] = -1
            if u in self._u_prim and self._deg_u[u] < self._l:
                self._u_prim.discard(u)
            if u in self._u_prim:
                self._update_rl(v)
                if self._rl[v] < self._erl[v] - 1:
                    self._update_erl(v)
            self._designate_edge(u)

    def _designate_edge(self, u):
        levels = self._u_neighbors[u]
        if u not in self._u_prim:
            v = min(levels[0]) if levels[0] else -1
            self._designated[u] = v
            return v
        v = next((min(level) for level in levels if level), -1)
        self._designated[u] = v
        if v >= 0:
            self._update_rl(v)
            if self._rl[v] > self._erl[v]:
                self._update_erl(v)
        return v

    def reset(self):
        """Spread out designations concentrated on high ratio levels; return the level used."""
        k = self._t
        while k - 3 >= 0 and len(self._indexed_u(k - 3)) >= (
            self._ratios[k - 3] * self._threshold * len(self._indexed_u(k))
        ):
            k -= 3
        for v in sorted(self._indexed_v(k - 1)):
            while self._rl[v] >= k - 1:
                holder = next(
                    (u for u in sorted(self._u_prim) if self._designated[u] == v), None
                )
                if holder is None:
                    break
                self._designated[holder] = -1
                self._update_rl(v)
            if self._rl[v] > self._erl[v] or self._rl[v] < self._erl[v] - 1:
                self._update_erl(v)
        for u in sorted(self._indexed_u(k - 1)):
            if self._designated[u] == -1:
                self._designate_edge(u)
        return k

    def current_edge(self, i, k):
        """Return the graph node the designated edge of ``(i, k)`` leads to, or None."""
        return self._decode(self._designated[self._encode(i, k)])

    def response_adversary(self, a, da, b=None, db=None):
        """Remove the right vertex ``(a, da)``, or the edge ``(a, da) -> (b, db)`` when
        ``b`` is given, and repair the designations."""
        if b is None:
            v = self._encode(a, da)
            if v < 0:
                return
            for u in self._v[v]:
                self._remove_edge(u, v)
            return

        u, v = self._encode(a, da), self._encode(b, db)
        if u < 0 or v < 0:
            return
        self._remove_edge(u, v)
        if self._designated[u] == v:
            w = self._designate_edge(u)
            if w >= 0 and self._rl[w] == self._t:
                for _ in range(self._t):
                    self.reset()
                    if any(level >= self._t for level in self._rl):
                        return