"""Fomin-Kratsch-Woeginger exact minimum dominating set algorithm.

Vertices of degree one and two are branched on; once every remaining vertex
has degree at least three, a small optional dominating set is searched for
exhaustively.
"""

from __future__ import annotations

from koalagraph.dominating import (
    MinimumDominatingSet,
    SizedChoiceSearcher,
    is_optional_dominating_set,
    join_free_and_bounded,
    smaller_cardinality_set,
)
from koalagraph.graph import Graph


def find_mods_when_degree_at_least_3(graph, free, bounded):
    """Return a smallest optional dominating set of ``bounded`` drawn from free and bounded nodes.

    Sizes are tried while ``8 * size <= 3 * (|free| + |bounded|)``; ValueError is
    raised when no set within that bound exists.
    """
    possibilities = join_free_and_bounded(free, bounded)
    total = len(free) + len(bounded)
    size = 1
    while 8 * size <= 3 * total:
        found, choices = SizedChoiceSearcher(
            lambda chosen: is_optional_dominating_set(graph, chosen, bounded),
            possibilities,
            size,
        ).search()
        if found:
            solution = [False] * graph.number_of_nodes()
            for u in choices:
                solution[u] = True
            return solution
        size += 1
    raise ValueError("find_mods_when_degree_at_least_3 arguments are corrupted")


class _BranchingState:
    """Mutable state of the branching search, undone after each branch."""

    def __init__(self, neighborhood, bounded):
        self.free: set[int] = set()
        self.bounded: set[int] = set(bounded)
        self.required: set[int] = set()
        self.neighborhood: list[set[int]] = neighborhood
        self.degree_one = {v for v in bounded if len(neighborhood[v]) == 1}
        self.degree_two = {v for v in bounded if len(neighborhood[v]) == 2}

    def _on_degree_decrement(self, v):
        degree = len(self.neighborhood[v])
        if degree == 0:
            self.degree_one.discard(v)
        elif degree == 1:
            self.degree_one.add(v)
            self.degree_two.discard(v)
        elif degree == 2:
            self.degree_two.add(v)

    def _on_degree_increment(self, v):
        degree = len(self.neighborhood[v])
        if degree == 1:
            self.degree_one.add(v)
        elif degree == 2:
            self.degree_one.discard(v)
            self.degree_two.add(v)
        elif degree == 3:
            self.degree_two.discard(v)

    def _forget(self, vertex):
        """Remove ``vertex`` from the instance; return whether it was free."""
        is_free = vertex in self.free
        if is_free:
            self.free.discard(vertex)
        else:
            self.bounded.discard(vertex)
        degree = len(self.neighborhood[vertex])
        if degree == 1:
            self.degree_one.discard(vertex)
        elif degree == 2:
            self.degree_two.discard(vertex)
        for neighbor in self.neighborhood[vertex]:
            self.neighborhood[neighbor].discard(vertex)
            self._on_degree_decrement(neighbor)
        return is_free

    def _retrieve(self, vertex, is_free):
        for neighbor in self.neighborhood[vertex]:
            self.neighborhood[neighbor].add(vertex)
            self._on_degree_increment(neighbor)
        degree = len(self.neighborhood[vertex])
        if degree == 1:
            self.degree_one.add(vertex)
        elif degree == 2:
            self.degree_two.add(vertex)
        if is_free:
            self.free.add(vertex)
        else:
            self.bounded.add(vertex)

    def _add_to_solution(self, forced):
        moved = []
        for neighbor in sorted(self.neighborhood[forced]):
            if neighbor in self.bounded:
                self.bounded.discard(neighbor)
                self.free.add(neighbor)
                moved.append(neighbor)
        is_free = self._forget(forced)
        self.required.add(forced)
        return moved, is_free

    def _remove_from_solution(self, vertex, moved, is_free):
        self.required.discard(vertex)
        self._retrieve(vertex, is_free)
        for neighbor in reversed(moved):
            self.free.discard(neighbor)
            self.bounded.add(neighbor)

    def solve(self):
        if self.degree_one:
            return self._branch_degree_one(min(self.degree_one))
        if self.degree_two:
            return self._branch_degree_two(min(self.degree_two))
        return self._solve_dense()

    def _branch_degree_one(self, u):
        unique = min(self.neighborhood[u])
        is_free = self._forget(u)
        if is_free:
            solution = self.solve()
        else:
            moved, moved_free = self._add_to_solution(unique)
            solution = self.solve()
            self._remove_from_solution(unique, moved, moved_free)
        self._retrieve(u, is_free)
        return solution

    def _branch_degree_two(self, v):
        u1, u2 = sorted(self.neighborhood[v])
        v_is_free = v in self.free

        v_forgotten = self._forget(v)
        moved1, free1 = self._add_to_solution(u1)
        solution1 = self.solve()
        self._remove_from_solution(u1, moved1, free1)
        self._retrieve(v, v_forgotten)

        u1_forgotten = self._forget(u1)
        u2_forgotten = self._forget(u2)
        moved2, free2 = self._add_to_solution(v)
        solution2 = self.solve()
        self._remove_from_solution(v, moved2, free2)
        self._retrieve(u2, u2_forgotten)
        self._retrieve(u1, u1_forgotten)

        v_forgotten = self._forget(v)
        if v_is_free:
            solution3 = self.solve()
        else:
            moved3, free3 = self._add_to_solution(u2)
            solution3 = self.solve()
            self._remove_from_solution(u2, moved3, free3)
        self._retrieve(v, v_forgotten)

        return smaller_cardinality_set(smaller_cardinality_set(solution1, solution2), solution3)

    def _solve_dense(self):
        n = len(self.neighborhood)
        isolated = {i for i in range(n) if not self.neighborhood[i] and i in self.bounded}
        self.bounded -= isolated
        if not self.bounded:
            solution = [False] * n
        else:
            graph = Graph(n)
            for i, adjacent in enumerate(self.neighborhood):
                if i in self.required:
                    continue
                for e in sorted(adjacent):
                    if i < e:
                        graph.add_edge(i, e)
            solution = find_mods_when_degree_at_least_3(graph, self.free, self.bounded)
        for u in self.required | isolated:
            solution[u] = True
        self.bounded |= isolated
        return solution


class FominKratschWoegingerMDS(MinimumDominatingSet):
    """Exact minimum dominating set by branching on low-degree vertices."""

    def run(self):
        neighborhood: list[set[int]] = [set() for _ in range(self.graph.number_of_nodes())]
        for u in self.graph.nodes():
            neighborhood[u].update(self.graph.neighbors(u))
        state = _BranchingState(neighborhood, self.graph.nodes())
        self.dominating_set = state.solve()
        self._has_run = True