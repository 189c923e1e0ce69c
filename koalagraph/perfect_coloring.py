"""Optimal colouring of perfect graphs via stable sets meeting all maximum cliques."""

from __future__ import annotations

from itertools import accumulate

import networkx as nx

from koalagraph.coloring import VertexColoring
from koalagraph.graph import Graph, to_complement


def compute_theta(n, edges):
    """Lovász theta of a perfect graph on nodes ``1..n``.

    For perfect graphs theta equals the stability number, which is computed here.
    """
    graph = nx.Graph()
    graph.add_nodes_from(range(1, n + 1))
    graph.add_edges_from(edges)
    _, size = nx.max_weight_clique(nx.complement(graph), weight=None)
    return float(size)


def _node_vector(graph):
    out = [0] * graph.upper_node_id_bound()
    for v in graph.nodes():
        out[v] = 1
    return out


class PerfectGraphVertexColoring(VertexColoring):
    omega = 0

    def run(self):
        self.omega = self.get_omega(self.graph)
        color = 1
        while self.graph.number_of_nodes() > 0:
            for v in self.get_stable_set_intersecting_all_maximum_cliques():
                self.colors[v] = color
                self.graph.remove_node(v)
            color += 1
        self._has_run = True

    def check(self):
        """Raise if the number of colours used differs from the clique number."""
        self.assure_finished()
        chi = max(self.colors.values(), default=0)
        if chi != self.omega:
            raise RuntimeError(f"used {chi} colours but clique number is {self.omega}")

    def get_stable_set_intersecting_all_maximum_cliques(self):
        cliques = self.get_maximum_clique(self.graph)
        omega = sum(cliques)
        while True:
            stable_set = self.get_maximum_weighted_stable_set(self.graph, cliques)
            subgraph = self.graph.copy()
            for v in stable_set:
                subgraph.remove_node(v)
            if self.get_omega(subgraph) < omega:
                return stable_set
            clique = self.get_maximum_clique(subgraph)
            cliques = [a + b for a, b in zip(cliques, clique)]

    @staticmethod
    def get_theta(graph, keep_nodes):
        indices = list(accumulate(keep_nodes))
        total = indices[-1] if indices else 0
        if total <= 1:
            return total
        edges = [(indices[u], indices[v]) for u, v in graph.edges()
                 if keep_nodes[u] and keep_nodes[v]]
        if total == 2:
            return 1 + (not edges)
        theta = compute_theta(total, edges)
        theta_int = int(theta + 0.5)
        if abs(theta - theta_int) > 0.3:
            raise ArithmeticError(f"Non-integer theta for a perfect graph: {theta}")
        return theta_int

    @staticmethod
    def get_omega(graph):
        return PerfectGraphVertexColoring.get_theta(to_complement(graph), _node_vector(graph))

    @staticmethod
    def get_maximum_clique(graph):
        return PerfectGraphVertexColoring.get_maximum_stable_set(to_complement(graph))

    @staticmethod
    def get_maximum_stable_set(graph):
        """Return a 0/1 vector indexed by node id marking a maximum stable set."""
        keep = _node_vector(graph)
        theta = PerfectGraphVertexColoring.get_theta(graph, keep)
        for v in graph.nodes():
            keep[v] = 0
            if PerfectGraphVertexColoring.get_theta(graph, keep) != theta:
                keep[v] = 1
        return keep

    @staticmethod
    def get_maximum_weighted_stable_set(graph, weights):
        """Return node ids of a maximum stable set under integer node weights."""
        count = list(accumulate(weights))
        auxiliary = Graph(count[-1] if count else 0)
        for u, v in graph.edges():
            for ni in range(count[u - 1] if u else 0, count[u]):
                for nj in range(count[v - 1] if v else 0, count[v]):
                    auxiliary.add_edge(ni, nj)
        stable_set = PerfectGraphVertexColoring.get_maximum_stable_set(auxiliary)
        out = []
        index = 0
        for i, chosen in enumerate(stable_set):
            if chosen:
                while count[index] <= i:
                    index += 1
                if not out or out[-1] != index:
                    out.append(index)
        return out