"""Minimum dominating sets: shared base, exhaustive search and search helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from koalagraph.graph import Algorithm


class MinimumDominatingSet(Algorithm, ABC):
    """Base for exact minimum dominating set algorithms.

    A dominating set is a list of booleans indexed by node id.
    """

    def __init__(self, graph):
        self.graph = graph
        self.dominating_set: list[bool] = []

    @abstractmethod
    def run(self):
        """Compute a minimum dominating set of the graph."""

    def get_dominating_set(self):
        self.assure_finished()
        return self.dominating_set

    def is_dominating(self, dominating_set):
        """Return True if every node is in ``dominating_set`` or next to a node in it."""
        dominated = [False] * len(dominating_set)
        for u in self.graph.nodes():
            if dominating_set[u]:
                dominated[u] = True
                for v in self.graph.neighbors(u):
                    dominated[v] = True
        return all(dominated)

    @staticmethod
    def dominating_set_size(dominating_set):
        return sum(1 for chosen in dominating_set if chosen)


def smaller_cardinality_set(lhs, rhs):
    """Return ``lhs`` if it has strictly fewer chosen nodes than ``rhs``, else ``rhs``."""
    if MinimumDominatingSet.dominating_set_size(lhs) < MinimumDominatingSet.dominating_set_size(rhs):
        return lhs
    return rhs


class ExhaustiveMDS(MinimumDominatingSet):
    """Branch over every node, dropping it whenever the rest still dominates."""

    def run(self):
        all_vertices = [True] * self.graph.number_of_nodes()
        self.dominating_set = self._dominating_subset(all_vertices, 0)
        self._has_run = True

    def _dominating_subset(self, superset, depth):
        if depth == len(superset):
            return list(superset)
        superset[depth] = False
        if self.is_dominating(superset):
            excluded = self._dominating_subset(superset, depth + 1)
            superset[depth] = True
            included = self._dominating_subset(superset, depth + 1)
            return smaller_cardinality_set(excluded, included)
        superset[depth] = True
        return self._dominating_subset(superset, depth + 1)


class SizedChoiceSearcher:
    """Search the subsets of exactly ``size`` possibilities, in lexicographic order,
    for one accepted by ``verifier``."""

    def __init__(self, verifier: Callable[[list[int]], bool], possibilities: Sequence[int], size: int):
        self.verifier = verifier
        self.possibilities = list(possibilities)
        self.size = size

    def search(self):
        """Return ``(found, choices)``; ``choices`` is empty when nothing was found."""
        choices: list[int] = []
        found = self._search(choices, 0, self.size)
        return found, choices

    def _search(self, choices, decide_on, left):
        if decide_on == len(self.possibilities):
            return self.verifier(choices)
        if left > 0:
            choices.append(self.possibilities[decide_on])
            if self._search(choices, decide_on + 1, left - 1):
                return True
            choices.pop()
        return decide_on + left < len(self.possibilities) and self._search(
            choices, decide_on + 1, left
        )


def join_free_and_bounded(free, bounded):
    """Free nodes in ascending order followed by bounded nodes in ascending order."""
    return sorted(free) + sorted(bounded)


def is_optional_dominating_set(graph, choices, bounded):
    """Return True if ``choices`` dominates every node in ``bounded``."""
    remaining = set(bounded)
    for e in choices:
        remaining.discard(e)
        remaining.difference_update(graph.neighbors(e))
    return not remaining