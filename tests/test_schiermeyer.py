import pytest

from koalagraph.dominating import MinimumDominatingSet
from koalagraph.graph import Graph
from koalagraph.schiermeyer import (
    BigMODSSolver,
    SchiermeyerMDS,
    core,
    find_big_mods,
    find_small_mods,
    matching_mods,
)


def build_graph(n, edges):
    graph = Graph(n, False, False)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


EXAMPLE_32 = [
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

PETERSEN = [
    (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
    (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
    (5, 7), (7, 9), (9, 6), (6, 8), (8, 5),
]

C4 = [(0, 1), (1, 2), (2, 3), (3, 0)]


@pytest.mark.parametrize(
    "n, edges, expected",
    [
        (32, EXAMPLE_32, 5),
        (10, PETERSEN, 3),
        (6, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0)], 2),
        (5, [(0, 1), (0, 2), (0, 3), (0, 4)], 1),
        (4, [(0, 1), (1, 2), (2, 3)], 2),
        (3, [], 3),
        (4, C4, 2),
    ],
)
def test_schiermeyer(n, edges, expected):
    graph = build_graph(n, edges)
    algorithm = SchiermeyerMDS(graph)
    algorithm.run()
    result = algorithm.get_dominating_set()
    assert algorithm.is_dominating(result)
    assert MinimumDominatingSet.dominating_set_size(result) == expected


def test_core_of_star():
    graph = build_graph(5, [(0, 1), (0, 2), (0, 3), (0, 4)])
    free, bounded, required = set(), set(range(5)), set()
    reduced = core(graph, free, bounded, required)
    assert required == {0}
    assert free == set()
    assert bounded == set()
    assert reduced.number_of_edges() == 0


def test_core_of_path():
    graph = build_graph(4, [(0, 1), (1, 2), (2, 3)])
    free, bounded, required = set(), set(range(4)), set()
    core(graph, free, bounded, required)
    assert required == {1, 2}
    assert bounded == set()


def test_core_leaves_cycle_unchanged():
    graph = build_graph(4, C4)
    free, bounded, required = set(), set(range(4)), set()
    reduced = core(graph, free, bounded, required)
    assert bounded == {0, 1, 2, 3}
    assert required == set()
    assert reduced.number_of_edges() == 4


def test_find_small_mods_fails_on_cycle_of_four():
    graph = build_graph(4, C4)
    assert find_small_mods(graph, set(), {0, 1, 2, 3}, set()) == (False, [])


def test_find_small_mods_includes_required():
    graph = build_graph(6, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0)])
    found, solution = find_small_mods(graph, set(), {0, 1, 2, 3, 4, 5}, {5})
    assert found
    assert solution == [True, False, False, True, False, True]


def test_matching_mods_on_cycle():
    graph = build_graph(4, C4)
    assert matching_mods(graph, {0}, set(), {0, 1, 2, 3}) == [True, False, True, False]


def test_find_big_mods_on_cycle():
    graph = build_graph(4, C4)
    assert find_big_mods(graph, set(), {0, 1, 2, 3}, set()) == [False, True, False, True]


def test_big_mods_solver_keeps_all_possibilities_without_better_candidate():
    graph = build_graph(4, C4)
    solver = BigMODSSolver(graph, lambda chosen: [True] * 4, [0, 1, 2, 3])
    assert solver.run() == [True, True, True, True]
    assert solver.run() == [True, True, True, True]


def test_schiermeyer_requires_run():
    with pytest.raises(RuntimeError):
        SchiermeyerMDS(build_graph(2, [(0, 1)])).get_dominating_set()