import pytest

from koalagraph.dynamic_tree import DynamicTree


@pytest.fixture
def chain():
    tree = DynamicTree()
    tree.initialize(3)
    tree.link(0, 1, 5)
    tree.link(1, 2, 3)
    return tree


def test_initialized_nodes_are_separate_roots():
    tree = DynamicTree()
    tree.initialize(3)
    assert [tree.find_parent(v) for v in range(3)] == [None, None, None]
    assert [tree.find_root(v) for v in range(3)] == [0, 1, 2]
    assert [tree.get_value(v) for v in range(3)] == [0, 0, 0]
    assert tree.find_children(0) == set()


def test_link_builds_parent_and_children(chain):
    assert chain.find_parent(0) == 1
    assert chain.find_parent(1) == 2
    assert chain.find_parent(2) is None
    assert chain.find_root(0) == 2
    assert chain.find_children(1) == {0}
    assert chain.find_children(2) == {1}
    assert chain.get_value(0) == 5
    assert chain.get_value(1) == 3


def test_minimum_path_capacity(chain):
    assert chain.get_minimum_path_residue_capacity(0) == 3
    assert chain.get_minimum_path_residue_capacity(1) == 3


def test_minimum_path_capacity_of_root_is_the_cap(chain):
    assert chain.get_minimum_path_residue_capacity(2) == 2**31 - 2


def test_no_saturated_edge_on_positive_path(chain):
    assert chain.find_saturated_edge(0) == (None, None)


def test_saturated_edge_after_push(chain):
    chain.add_value(0, -3)
    assert chain.get_value(1) == 0
    assert chain.get_value(2) == 0
    assert chain.find_saturated_edge(0) == (1, 2)
    chain.cut(1, 2)
    assert chain.find_children(2) == set()
    assert chain.find_root(0) == 1
    assert chain.find_saturated_edge(0) == (None, None)


def test_find_children_returns_a_copy(chain):
    children = chain.find_children(1)
    children.add(99)
    assert chain.find_children(1) == {0}


def test_unknown_node_raises():
    tree = DynamicTree()
    tree.initialize(2)
    with pytest.raises(IndexError):
        tree.get_value(5)