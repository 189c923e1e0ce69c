"""Greedy vertex-colouring heuristics."""

from __future__ import annotations

import random
from collections import defaultdict

from koalagraph.graph import Algorithm


class _BucketPQ:
    """Integer-keyed priority queue; among equal keys the latest inserted leaves first."""

    def __init__(self):
        self._buckets: dict[int, list[int]] = defaultdict(list)
        self._keys: dict[int, int] = {}

    def __contains__(self, v):
        return v in self._keys

    def __len__(self):
        return len(self._keys)

    def key(self, v):
        return self._keys[v]

    def insert(self, key, v):
        self._buckets[key].insert(0, v)
        self._keys[v] = key

    def remove(self, v):
        key = self._keys.pop(v)
        bucket = self._buckets[key]
        bucket.remove(v)
        if not bucket:
            del self._buckets[key]

    def change_key(self, key, v):
        self.remove(v)
        self.insert(key, v)

    def extract_min(self):
        key = min(self._buckets)
        bucket = self._buckets[key]
        v = bucket.pop(0)
        if not bucket:
            del self._buckets[key]
        del self._keys[v]
        return key, v


def _max_degree(graph):
    return max((graph.degree(v) for v in graph.nodes()), default=0)


class VertexColoring(Algorithm):
    """Base for colourings; colours are positive integers."""

    def __init__(self, graph):
        self.graph = graph.copy()
        self.colors: dict[int, int] = {}

    def get_coloring(self):
        self.assure_finished()
        return self.colors

    def _greedy_color(self, v):
        if v in self.colors:
            return self.colors[v]
        forbidden = {self.colors[u] for u in self.graph.in_neighbors(v) if u in self.colors}
        color = 1
        while color in forbidden:
            color += 1
        self.colors[v] = color
        return color


class RandomSequentialVertexColoring(VertexColoring):
    def run(self):
        order = self.graph.nodes()
        random.shuffle(order)
        for v in order:
            self._greedy_color(v)
        self._has_run = True


class LargestFirstVertexColoring(VertexColoring):
    def run(self):
        for v in self.largest_first_ordering():
            self._greedy_color(v)
        self._has_run = True

    def largest_first_ordering(self):
        """Uncoloured vertices by non-increasing degree."""
        vertices = [v for v in self.graph.nodes() if v not in self.colors]
        return sorted(vertices, key=self.graph.degree, reverse=True)


class SmallestLastVertexColoring(VertexColoring):
    def run(self):
        for v in self.smallest_last_ordering():
            self._greedy_color(v)
        self._has_run = True

    def smallest_last_ordering(self):
        """Repeatedly remove a minimum-degree vertex; return removals in reverse."""
        queue = _BucketPQ()
        for v in self.graph.nodes():
            if v not in self.colors:
                queue.insert(self.graph.degree(v), v)
        removed = []
        while queue:
            _, v = queue.extract_min()
            removed.append(v)
            for u in self.graph.in_neighbors(v):
                if u in queue:
                    queue.change_key(queue.key(u) - 1, u)
        return removed[::-1]


class SaturatedLargestFirstVertexColoring(VertexColoring):
    def run(self):
        saturations: dict[int, set[int]] = defaultdict(set)
        for u, v in self.graph.edges():
            if u not in self.colors and v in self.colors:
                saturations[u].add(self.colors[v])
            elif u in self.colors and v not in self.colors:
                saturations[v].add(self.colors[u])

        max_degree = _max_degree(self.graph)
        queue = _BucketPQ()
        for v in self.graph.nodes():
            if v not in self.colors:
                queue.insert(-len(saturations[v]) * max_degree - self.graph.degree(v), v)

        while queue:
            _, v = queue.extract_min()
            color = self._greedy_color(v)
            for u in self.graph.in_neighbors(v):
                if u in queue and color not in saturations[u]:
                    saturations[u].add(color)
                    queue.change_key(queue.key(u) - max_degree, u)
        self._has_run = True


class GreedyIndependentSetVertexColoring(VertexColoring):
    def run(self):
        queues = [_BucketPQ(), _BucketPQ()]
        for v in self.graph.nodes():
            if v not in self.colors:
                queues[1].insert(self.graph.degree(v), v)
        color = 1
        while queues[color % 2]:
            queue, following = queues[color % 2], queues[1 - color % 2]
            while queue:
                _, v = queue.extract_min()
                for u in self.graph.in_neighbors(v):
                    if u in queue:
                        following.insert(queue.key(u) - 1, u)
                        queue.remove(u)
                    elif u in following:
                        following.change_key(following.key(u) - 1, u)
                self.colors.setdefault(v, color)
            color += 1
        self._has_run = True