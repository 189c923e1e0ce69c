import pytest

from koalagraph.graph import Graph
from koalagraph.perfect_coloring import PerfectGraphVertexColoring, compute_theta


def build_graph(n, edges):
    g = Graph(n)
    for u, v in edges:
        g.add_edge(u, v)
    return g


@pytest.mark.parametrize("n,edges,expected", [
    (6, [(0, 1), (0, 2), (1, 2), (0, 3), (1, 4), (2, 5)], 3),
    (6, [(0, 1), (0, 2), (1, 2), (0, 3), (1, 4), (2, 5), (3, 4), (3, 5), (4, 5)], 3),
])
def test_perfect_coloring(n, edges, expected):
    algorithm = PerfectGraphVertexColoring(build_graph(n, edges))
    algorithm.run()
    colors = algorithm.get_coloring()
    for u, v in edges:
        assert colors[u] != colors[v]
    assert max(colors.values()) == expected
    algorithm.check()


def test_compute_theta_empty_and_triangle():
    assert compute_theta(3, []) == 3
    assert compute_theta(3, [(1, 2), (2, 3), (1, 3)]) == 1


def test_omega_of_c4():
    g = build_graph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])
    assert PerfectGraphVertexColoring.get_omega(g) == 2


def test_maximum_stable_set_is_stable_and_maximum():
    edges = [(0, 1), (0, 2), (1, 3), (2, 3)]
    g = build_graph(4, edges)
    keep = PerfectGraphVertexColoring.get_maximum_stable_set(g)
    assert sum(keep) == 2
    for u, v in edges:
        assert not (keep[u] and keep[v])


def test_maximum_clique_of_triangle_plus_pendant():
    g = build_graph(4, [(0, 1), (1, 2), (0, 2), (2, 3)])
    assert PerfectGraphVertexColoring.get_maximum_clique(g) == [1, 1, 1, 0]


def test_weighted_stable_set_prefers_heavy_vertex():
    g = build_graph(3, [(0, 1), (1, 2)])
    assert PerfectGraphVertexColoring.get_maximum_weighted_stable_set(g, [1, 5, 1]) == [1]
    assert PerfectGraphVertexColoring.get_maximum_weighted_stable_set(g, [1, 1, 1]) == [0, 2]


def test_check_before_run_raises():
    with pytest.raises(RuntimeError):
        PerfectGraphVertexColoring(build_graph(2, [(0, 1)])).check()