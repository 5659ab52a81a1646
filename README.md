# wgraph

A small library for weighted undirected graphs with integer edge weights. It
offers two classic algorithms:

- **Dijkstra's algorithm**: the shortest distance from one vertex to every
  other vertex.
- **Prim's algorithm**: a minimum spanning tree, the cheapest set of edges
  that connects every vertex reachable from a start vertex.

Edge weights must not be negative for Dijkstra's algorithm to give correct
results.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from wgraph.graph import WeightedGraph

g = WeightedGraph()
g.add_edge("A", "B", 4)
g.add_edge("A", "C", 6)
g.add_edge("A", "D", 3)
g.add_edge("B", "D", 5)
g.add_edge("C", "D", 2)

g.vertex_count()   # 4
g.edge_count()     # 5
"A" in g           # True
g.has_vertex("Z")  # False

dist = g.dijkstra("A")
dist["C"]          # 5  (A -> D -> C)

edges, total = g.prims_mst("A")
total              # 9
# edges holds (from, to, weight) tuples in the order they joined the tree

print(g.format())  # one line per vertex, e.g. "A: B(4), C(6), D(3)"
g.print()          # writes the same listing to standard output
```

`add_edge(source, target, weight)` creates any vertex that does not exist
yet and records the edge in both directions. `add_vertex` does nothing if the
vertex is already there. Adjacency entries are `Edge` objects with `to` and
`weight` fields.

`dijkstra(source)` returns a dict that maps every vertex in the graph to its
distance from `source`. Vertices that cannot be reached map to `math.inf`. If
the source vertex is unknown, every vertex maps to `math.inf`.

`prims_mst(start)` returns a list of `(from, to, weight)` edges and their total
weight. If the start vertex is unknown, the result is `([], 0)`. When the
graph is not connected, the tree covers only the part reachable from `start`.

`print(file=None)` writes the adjacency listing to the given text stream, or
to standard output.

## Demo

The demo builds a small map of cities (`wgraph.demo.build_city_graph`),
prints it, and then prints the shortest distances from `SLC` and the minimum
spanning tree that starts there:

```
wgraph-demo
```

## Limits

The graph lives in memory only: there is no loading from or saving to files.
Dijkstra's algorithm returns distances only, not the paths themselves, and
there are no directed graphs.