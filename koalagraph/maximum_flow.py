"""Maximum flow by the King-Rao-Tarjan push-relabel algorithm on dynamic trees."""

from __future__ import annotations

from collections import defaultdict

from koalagraph.dynamic_tree import DynamicTree
from koalagraph.edge_designator import KRTEdgeDesignator
from koalagraph.graph import Algorithm


def _reverse(edge):
    return edge[1], edge[0]


class MaximumFlow(Algorithm):
    """Base for maximum flow algorithms on directed graphs with integer capacities."""

    def __init__(self, graph, source, target):
        if not graph.has_node(source) or not graph.has_node(target):
            raise ValueError("source and target must be nodes of the graph")
        self.graph = graph.copy()
        self.source = source
        self.target = target
        self.flow_size = 0

    def get_flow_size(self):
        self.assure_finished()
        return self.flow_size


class KingRaoTarjanMaximumFlow(MaximumFlow):
    """Push-relabel with an adversarial edge designator picking the edges to push along.

    Edges are added to the working set one by one, largest capacity first; the
    capacity of edges not yet added is kept as hidden excess at their tails.
    """

    def __init__(self, graph, source, target, designator=None):
        super().__init__(graph, source, target)
        self.edge_designator = designator if designator is not None else KRTEdgeDesignator()

    def _visible_excess(self, v):
        return max(0, self._excess[v] - self._hidden[v])

    def _positive_excess_node(self):
        self._positive.discard(self.source)
        self._positive.discard(self.target)
        return min(self._positive) if self._positive else None

    def _update_positive_excess(self, v):
        if self._visible_excess(v) > 0:
            self._positive.add(v)
        else:
            self._positive.discard(v)

    def _get_flow(self, edge):
        first, second = edge
        first_parent = self._tree.find_parent(first)
        second_parent = self._tree.find_parent(second)
        if first_parent == second:
            return self._capacity[edge] - self._tree.get_value(first)
        if second_parent == first:
            return -(self._capacity[_reverse(edge)] - self._tree.get_value(second))
        return self._flow[edge]

    def _set_flow(self, edge, amount):
        self._flow[edge] = amount
        self._flow[_reverse(edge)] = -amount

    def _saturate(self, edge):
        first, second = edge
        capacity = self._capacity[edge]
        self._set_flow(edge, capacity)
        self._excess[first] -= capacity
        self._excess[second] += capacity
        self._update_positive_excess(first)
        self._update_positive_excess(second)
        self.edge_designator.response_adversary(
            first, self._d[first], second, self._d[first] - 1
        )

    def _add_edge(self, edge):
        first, second = edge
        rev = _reverse(edge)
        self._e_star.add(edge)
        self._e_star.add(rev)
        self._hidden[first] -= self._capacity[edge]
        self._hidden[second] -= self._capacity[rev]
        self._update_positive_excess(first)
        self._update_positive_excess(second)
        if self._d[first] > self._d[second]:
            self._saturate(edge)
        elif self._d[second] > self._d[first]:
            self._saturate(rev)

    def _cut(self, edge):
        first, second = edge
        self._set_flow(edge, self._capacity[edge] - self._tree.get_value(first))
        self._tree.cut(first, second)
        self.edge_designator.response_adversary(first, self._d[first], second, self._d[second])

    def _initialize(self):
        self._tree = DynamicTree()
        self._capacity: dict[tuple[int, int], int] = defaultdict(int)
        self._flow: dict[tuple[int, int], int] = defaultdict(int)
        self._excess: dict[int, int] = defaultdict(int)
        self._hidden: dict[int, int] = defaultdict(int)
        self._positive: set[int] = set()
        self._e_star: set[tuple[int, int]] = set()

        self._tree.initialize(self.graph.number_of_nodes())
        self.edge_designator.initialize(self.graph)
        for u, v, w in self.graph.weighted_edges():
            self._capacity[(u, v)] = int(w)
            self._hidden[u] += int(w)
            self._update_positive_excess(u)
        self._d = {v: 0 for v in self.graph.nodes()}
        for _ in range(self.graph.number_of_nodes()):
            self._relabel(self.source)
        for v in self.graph.neighbors(self.source):
            self._add_edge((self.source, v))

    def _edges_list(self):
        cost: dict[tuple[int, int], int] = defaultdict(int)
        for u, v, w in self.graph.weighted_edges():
            if self.source in (u, v):
                continue
            cost[(min(u, v), max(u, v))] += int(w)
        return sorted(sorted(cost), key=cost.__getitem__)

    def _tree_push(self, v, u):
        if self._tree.find_root(v) == v:
            edge = (v, u)
            self._tree.link(v, u, self._capacity[edge] - self._get_flow(edge))

        delta = min(
            self._tree.get_minimum_path_residue_capacity(v), self._visible_excess(v)
        )
        self._tree.add_value(v, -delta)

        path_end = self._tree.find_root(v)
        self._excess[v] -= delta
        self._excess[path_end] += delta
        self._update_positive_excess(v)
        self._update_positive_excess(path_end)

        edge = self._tree.find_saturated_edge(v)
        while edge[0] != edge[1]:
            self._cut(edge)
            edge = self._tree.find_saturated_edge(edge[1])

    def _relabel(self, v):
        for child in self._tree.find_children(v):
            self._cut((child, v))

        self.edge_designator.response_adversary(v, self._d[v])
        self._d[v] += 1

        for w in self.graph.neighbors(v):
            edge = (v, w)
            eligible = (
                self._capacity[edge] - self._get_flow(edge) > 0
                and self._d[v] == self._d[w] + 1
                and edge in self._e_star
            )
            if not eligible:
                self.edge_designator.response_adversary(v, self._d[v], w, self._d[v] - 1)

    def run(self):
        self._initialize()
        pending = self._edges_list()
        while pending:
            self._add_edge(pending.pop())
            v = self._positive_excess_node()
            while v is not None:
                u = self.edge_designator.current_edge(v, self._d[v])
                if u is not None:
                    self._tree_push(v, u)
                else:
                    self._relabel(v)
                v = self._positive_excess_node()
        self.flow_size = self._visible_excess(self.target)
        self._has_run = True