"""Schiermeyer's exact minimum dominating set algorithm via optional dominating sets."""

from __future__ import annotations

from typing import Callable

import networkx as nx

from koalagraph.dominating import (
    MinimumDominatingSet,
    SizedChoiceSearcher,
    is_optional_dominating_set,
    join_free_and_bounded,
)
from koalagraph.graph import Graph


def _build_graph(neighbors):
    graph = Graph(len(neighbors))
    for i, adjacent in enumerate(neighbors):
        for e in sorted(adjacent):
            if i not in neighbors[e]:
                raise ValueError(f"asymmetric adjacency between {i} and {e}")
            if i < e:
                graph.add_edge(i, e)
    return graph


def core(graph, free, bounded, required):
    """Apply the reduction rules until none fires and return the reduced graph.

    ``free``, ``bounded`` and ``required`` are updated in place.
    """
    intermediate = [set() for _ in range(graph.number_of_nodes())]
    for u, v in graph.edges():
        intermediate[u].add(v)
        intermediate[v].add(u)

    process = True
    while process:
        process = False

        isolated = {e for e in bounded if not intermediate[e]}
        if isolated:
            process = True
            required |= isolated
            bounded -= isolated

        covered = {e for e in bounded if intermediate[e] & required}
        if covered:
            process = True
        free |= covered
        bounded -= covered

        for i, adjacent in enumerate(intermediate):
            if i in free:
                removed = {e for e in adjacent if e in free or e in required}
                if removed:
                    process = True
                    adjacent -= removed
            elif i in required and adjacent:
                process = True
                for e in adjacent:
                    if e in bounded:
                        intermediate[e].discard(i)
                adjacent.clear()

        useless = {
            e for e in free
            if sum(1 for nei in intermediate[e] if nei in bounded) <= 1
        }
        if useless:
            process = True
        for e in useless:
            for nei in intermediate[e]:
                intermediate[nei].discard(e)
            intermediate[e].clear()
        free -= useless

        for e in sorted(bounded):
            if len(intermediate[e]) == 1 and e not in required:
                process = True
                unique = min(intermediate[e])
                free.discard(unique)
                required.add(unique)
        bounded -= required

    return _build_graph(intermediate)


def find_small_mods(graph, free, bounded, required):
    """Look for an optional dominating set of size at most a third of the candidates.

    Returns ``(found, solution)``; ``solution`` also marks the required nodes.
    """
    possibilities = join_free_and_bounded(free, bounded)
    total = len(free) + len(bounded)
    for size in range(1, total // 3 + 1):
        found, choices = SizedChoiceSearcher(
            lambda chosen: is_optional_dominating_set(graph, chosen, bounded),
            possibilities,
            size,
        ).search()
        if found:
            solution = [False] * graph.number_of_nodes()
            for u in graph.nodes():
                solution[u] = u in required
            for u in choices:
                solution[u] = True
            return True, solution
    return False, []


class BigMODSSolver:
    """Enumerate small candidate sets whose closed neighbourhoods are large enough
    and keep the best optional dominating set the evaluator builds from them."""

    def __init__(self, graph, evaluator: Callable[[set[int]], list[bool]], possibilities):
        self.graph = graph
        self.evaluator = evaluator
        self.possibilities = list(possibilities)
        self._choices: set[int] = set()
        self._closed: set[int] = set()
        self._best: list[bool] = []

    def run(self):
        self._best = [False] * self.graph.number_of_nodes()
        for e in self.possibilities:
            self._best[e] = True
        self._choices = set()
        self._closed = set()
        self._recurse(0)
        return self._best

    def _newly_covered(self, v):
        return {u for u in (v, *self.graph.neighbors(v)) if u not in self._closed}

    def _recurse(self, decide_on):
        if decide_on == len(self.possibilities):
            closed = len(self._closed)
            chosen = len(self._choices)
            if closed < 3 * chosen or closed >= 3 * (chosen + 1):
                return
            for e in self.possibilities:
                if e in self._choices:
                    continue
                if closed + len(self._newly_covered(e)) >= 3 * (chosen + 1):
                    return
            candidate = self.evaluator(set(self._choices))
            if (MinimumDominatingSet.dominating_set_size(candidate)
                    < MinimumDominatingSet.dominating_set_size(self._best)):
                self._best = candidate
            return

        self._recurse(decide_on + 1)

        if 3 * (len(self._choices) + 1) > len(self.possibilities):
            return
        chosen = self.possibilities[decide_on]
        added = self._newly_covered(chosen)
        self._choices.add(chosen)
        self._closed |= added
        self._recurse(decide_on + 1)
        self._choices.discard(chosen)
        self._closed -= added


def matching_mods(graph, chosen, free, bounded):
    """Complete ``chosen`` to an optional dominating set using a maximum matching."""
    required = set(chosen)
    free_rest = set(free)
    bounded_rest = set(bounded)
    core_graph = core(graph, free_rest, bounded_rest, required)

    helper = nx.Graph()
    helper.add_nodes_from(range(graph.number_of_nodes()))
    owners: dict[tuple[int, int], int] = {}
    for u in sorted(bounded_rest):
        v = core_graph.ith_neighbor(u, 0)
        if v is not None and u < v:
            helper.add_edge(u, v)
            owners.setdefault((u, v), u)

    for u in sorted(free_rest):
        v1 = core_graph.ith_neighbor(u, 0)
        v2 = core_graph.ith_neighbor(u, 1)
        if v1 is None or v2 is None:
            raise ValueError(f"free node {u} has fewer than two neighbours after reduction")
        if v1 > v2:
            v1, v2 = v2, v1
        if (v1, v2) not in owners:
            helper.add_edge(v1, v2)
            owners[(v1, v2)] = u

    mate: dict[int, int] = {}
    for a, b in nx.max_weight_matching(helper, maxcardinality=True):
        mate[a] = b
        mate[b] = a

    solution = [False] * graph.number_of_nodes()
    for e in bounded_rest:
        partner = mate.get(e)
        if partner is None:
            solution[e] = True
        elif e < partner:
            solution[owners[(e, partner)]] = True
    for e in required:
        solution[e] = True
    return solution


def find_big_mods(graph, free, bounded, required):
    """Find the best optional dominating set among the large-neighbourhood candidates."""
    possibilities = join_free_and_bounded(free, bounded)
    best = BigMODSSolver(
        graph,
        lambda chosen: matching_mods(graph, chosen, free, bounded),
        possibilities,
    ).run()
    for e in required:
        best[e] = True
    return best


class SchiermeyerMDS(MinimumDominatingSet):
    def run(self):
        free: set[int] = set()
        bounded = set(self.graph.nodes())
        required: set[int] = set()
        core_graph = core(self.graph, free, bounded, required)
        if not bounded:
            self.dominating_set = [False] * self.graph.number_of_nodes()
            for u in self.graph.nodes():
                self.dominating_set[u] = u in required
        else:
            found, small = find_small_mods(core_graph, free, bounded, required)
            if found:
                self.dominating_set = small
            else:
                self.dominating_set = find_big_mods(core_graph, free, bounded, required)
        self._has_run = True