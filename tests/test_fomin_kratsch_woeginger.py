import pytest

from koalagraph.dominating import ExhaustiveMDS, MinimumDominatingSet
from koalagraph.fomin_kratsch_woeginger import (
    FominKratschWoegingerMDS,
    find_mods_when_degree_at_least_3,
)
from koalagraph.graph import Graph

EXAMPLE_EDGES = [
    (0, 1), (0, 2), (0, 4), (0, 8), (0, 16), (1, 2), (1, 3), (1, 5), (1, 9), (1, 17),
    (2, 3), (2, 4), (2, 6), (2, 10), (2, 18), (3, 4), (3, 5), (3, 7), (3, 11), (3, 19),
    (4, 5), (4, 6), (4, 8), (4, 12), (4, 20), (5, 6), (5, 7), (5, 9), (5, 13), (5, 21),
    (6, 7), (6, 8), (6, 10), (6, 14), (6, 22), (7, 8), (7, 9), (7, 11), (7, 15), (7, 23),
    (8, 9), (8, 10), (8, 12), (8, 16), (8, 24), (9, 10), (9, 11), (9, 13), (9, 17), (9, 25),
    (10, 11), (10, 12), (10, 14), (10, 18), (10, 26), (11, 12), (11, 13), (11, 15),
    (11, 19), (11, 27), (12, 13), (12, 14), (12, 16), (12, 20), (12, 28), (13, 14),
    (13, 15), (13, 17), (13, 21), (13, 29), (14, 15), (14, 16), (14, 18), (14, 22),
    (14, 30), (15, 16), (15, 17), (15, 19), (15, 23), (15, 31), (16, 17), (16, 18),
    (16, 20), (16, 24), (17, 18), (17, 19), (17, 21), (17, 25), (18, 19), (18, 20),
    (18, 22), (18, 26), (19, 20), (19, 21), (19, 23), (19, 27), (20, 21), (20, 22),
    (20, 24), (20, 28), (21, 22), (21, 23), (21, 25), (21, 29), (22, 23), (22, 24),
    (22, 26), (22, 30), (23, 24), (23, 25), (23, 27), (23, 31), (24, 25), (24, 26),
    (24, 28), (25, 26), (25, 27), (25, 29), (26, 27), (26, 28), (26, 30), (27, 28),
    (27, 29), (27, 31), (28, 29), (28, 30), (29, 30), (29, 31), (30, 31),
]

PETERSEN_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
    (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
    (5, 7), (7, 9), (9, 6), (6, 8), (8, 5),
]


def build_graph(n, edges):
    graph = Graph(n, False, False)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def cycle(n):
    return [(i, (i + 1) % n) for i in range(n)]


def path(n):
    return [(i, i + 1) for i in range(n - 1)]


def solve(n, edges):
    algorithm = FominKratschWoegingerMDS(build_graph(n, edges))
    algorithm.run()
    return algorithm


def test_source_example():
    algorithm = solve(32, EXAMPLE_EDGES)
    dominating_set = algorithm.get_dominating_set()
    assert algorithm.is_dominating(dominating_set)
    assert MinimumDominatingSet.dominating_set_size(dominating_set) == 5


@pytest.mark.parametrize(
    "n, edges, expected",
    [
        (2, [(0, 1)], 1),
        (5, path(5), 2),
        (4, cycle(4), 2),
        (5, cycle(5), 2),
        (6, cycle(6), 2),
        (7, cycle(7), 3),
        (5, [(0, 1), (0, 2), (0, 3), (0, 4)], 1),
        (4, [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)], 1),
        (3, [], 3),
        (3, [(0, 1)], 2),
        (10, PETERSEN_EDGES, 3),
    ],
)
def test_known_domination_numbers(n, edges, expected):
    algorithm = solve(n, edges)
    dominating_set = algorithm.get_dominating_set()
    assert len(dominating_set) == n
    assert algorithm.is_dominating(dominating_set)
    assert MinimumDominatingSet.dominating_set_size(dominating_set) == expected


@pytest.mark.parametrize(
    "n, edges",
    [
        (8, [(0, 1), (1, 2), (2, 3), (3, 0), (3, 4), (4, 5), (5, 6), (6, 7), (7, 4)]),
        (7, [(0, 1), (0, 2), (0, 3), (1, 4), (2, 5), (3, 6)]),
        (9, [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3), (3, 4), (4, 5), (5, 6), (6, 7), (7, 8)]),
    ],
)
def test_matches_exhaustive_search(n, edges):
    graph = build_graph(n, edges)
    fkw = FominKratschWoegingerMDS(graph)
    fkw.run()
    exhaustive = ExhaustiveMDS(graph)
    exhaustive.run()
    assert fkw.is_dominating(fkw.get_dominating_set())
    assert MinimumDominatingSet.dominating_set_size(fkw.get_dominating_set()) == (
        MinimumDominatingSet.dominating_set_size(exhaustive.get_dominating_set())
    )


def test_result_requires_run():
    algorithm = FominKratschWoegingerMDS(build_graph(3, [(0, 1)]))
    with pytest.raises(RuntimeError):
        algorithm.get_dominating_set()


def test_find_mods_on_complete_graph():
    graph = build_graph(4, [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])
    solution = find_mods_when_degree_at_least_3(graph, set(), {0, 1, 2, 3})
    assert solution == [True, False, False, False]


def test_find_mods_dominates_only_bounded():
    graph = build_graph(4, [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])
    solution = find_mods_when_degree_at_least_3(graph, {0}, {1, 2, 3})
    assert solution == [True, False, False, False]


def test_find_mods_rejects_corrupted_arguments():
    graph = build_graph(1, [])
    with pytest.raises(ValueError):
        find_mods_when_degree_at_least_3(graph, set(), {0})