# koalagraph

Graph algorithms on a small graph type with integer node ids:
greedy and perfect-graph vertex coloring, exact minimum dominating sets,
and maximum flow by the King-Rao-Tarjan push-relabel method on link-cut trees.

## The graph type

`koalagraph.graph.Graph(n=0, weighted=False, directed=False)` holds nodes
`0..n-1`. Nodes can be removed, and their ids are not used again.

- `add_edge(u, v, w=1.0)` adds an edge. The weight is kept only for weighted
  graphs. A missing node raises `KeyError`.
- `increase_weight(u, v, w)` adds `w` to an edge and creates the edge if it
  does not exist yet.
- `weight`, `remove_node`, `has_node`, `has_edge`, `degree`, `neighbors`,
  `in_neighbors`, `ith_neighbor` (returns `None` when the index is out of range),
  `nodes`, `edges`, `weighted_edges`, `number_of_nodes`, `number_of_edges`,
  `upper_node_id_bound` and `copy`.

`to_complement(graph)` returns the complement of an undirected graph. Nodes
that were removed stay removed.

Every algorithm derives from `koalagraph.graph.Algorithm`. Call `run()` before
reading a result. Reading a result earlier raises `RuntimeError`.
`has_finished()` tells whether `run()` has completed.

## Vertex coloring

`koalagraph.coloring` has these greedy heuristics. Colors are positive integers,
and `get_coloring()` returns a `{node: color}` dict.

- `RandomSequentialVertexColoring` colors the nodes in a random order, so the
  result can change from run to run.
- `LargestFirstVertexColoring` colors by non-increasing degree. The order is
  available from `largest_first_ordering()`.
- `SmallestLastVertexColoring` uses the smallest-last order, available from
  `smallest_last_ordering()`.
- `SaturatedLargestFirstVertexColoring` is DSatur: it prefers nodes that see the
  most colors, then nodes of highest degree.
- `GreedyIndependentSetVertexColoring` builds one independent set per color,
  each time taking the nodes of minimum degree first.

`koalagraph.perfect_coloring.PerfectGraphVertexColoring` colors a perfect graph
optimally. It does this by repeatedly removing a stable set that meets every
maximum clique. `check()` raises `RuntimeError` when the number of colors differs
from the clique number. `compute_theta(n, edges)` works on nodes `1..n` and
returns the stability number as a float. For perfect graphs this value equals
the Lovász theta. It is computed with networkx, not with a semidefinite solver.
The static helpers are `get_theta`, `get_omega`, `get_maximum_clique`,
`get_maximum_stable_set` and `get_maximum_weighted_stable_set`.

## Minimum dominating sets

These algorithms return a list of booleans indexed by node id.

- `koalagraph.dominating.ExhaustiveMDS` uses exhaustive branching.
- `koalagraph.schiermeyer.SchiermeyerMDS` first reduces the graph with the
  reduction rules in `core`. It then searches for small optional dominating
  sets with `find_small_mods`. If none is found, it searches for large ones
  with `find_big_mods`, which completes each candidate through a maximum
  matching in `matching_mods`.
- `koalagraph.fomin_kratsch_woeginger.FominKratschWoegingerMDS` branches on
  nodes of degree one and two. It then calls
  `find_mods_when_degree_at_least_3`, which raises `ValueError` when its input
  has no solution within the size bound.

Helpers shared by these algorithms:

- `MinimumDominatingSet.is_dominating(dominating_set)` and
  `MinimumDominatingSet.dominating_set_size(dominating_set)`.
- `smaller_cardinality_set`.
- `SizedChoiceSearcher`.
- `join_free_and_bounded`.
- `is_optional_dominating_set`.

## Maximum flow

`koalagraph.maximum_flow.KingRaoTarjanMaximumFlow(graph, source, target, designator=None)`
computes the size of a maximum flow in a directed weighted graph with integer
capacities. Read the result with `get_flow_size()`. A source or target that is
not in the graph raises `ValueError`.

The algorithm is built on two components:

- `koalagraph.dyn_tree.DynItem` is a link-cut tree node. It supports `link`,
  `cut`, `find_root`, `find_father`, `add_value`, `find_value` and
  `find_bottleneck`.
- `koalagraph.dynamic_tree.DynamicTree` is a forest over node ids that is built
  on `DynItem`.

Edges are chosen by `koalagraph.edge_designator.KRTEdgeDesignator(l=16, x=2.0, r0=0.25, t=8)`.
A designator built with other parameters can be passed in as `designator`.

## Example

```python
from koalagraph.graph import Graph
from koalagraph.coloring import SmallestLastVertexColoring
from koalagraph.dominating import MinimumDominatingSet
from koalagraph.schiermeyer import SchiermeyerMDS
from koalagraph.maximum_flow import KingRaoTarjanMaximumFlow

g = Graph(4, False, False)
for u, v in [(0, 1), (0, 2), (1, 3), (2, 3)]:
    g.add_edge(u, v)

coloring = SmallestLastVertexColoring(g)
coloring.run()
print(coloring.get_coloring())          # {node: color, ...}

mds = SchiermeyerMDS(g)
mds.run()
chosen = mds.get_dominating_set()
print(MinimumDominatingSet.dominating_set_size(chosen))

net = Graph(4, True, True)
for u, v, w in [(0, 1, 10), (0, 2, 5), (1, 2, 15), (1, 3, 5), (2, 3, 10)]:
    net.increase_weight(u, v, w)
    net.increase_weight(v, u, 0)
flow = KingRaoTarjanMaximumFlow(net, 0, 3)
flow.run()
print(flow.get_flow_size())             # 15
```

## What it does not do

The package is a library only and provides no command-line programs. It cannot
read or write graph files such as graph6, sparse6, digraph6 or DIMACS. To use
it, build a `Graph` in code. It does not recognise perfect graphs, and it does
not solve minimum dominating set through set-cover reductions.

## Running the tests

```
pip install -e ".[test]"
pytest
```