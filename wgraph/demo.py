"""Demonstration on a small weighted map of Utah cities."""

from __future__ import annotations

from collections.abc import Sequence

from wgraph.graph import WeightedGraph


def build_city_graph() -> WeightedGraph:
    """Build the demo map.

        SLC ---4--- Ogden
         |  \\         |
         6   3        5
         |    \\       |
       Provo---2---Logan
    """
    g = WeightedGraph()
    g.add_edge("SLC", "Ogden", 4)
    g.add_edge("SLC", "Provo", 6)
    g.add_edge("SLC", "Logan", 3)
    g.add_edge("Ogden", "Logan", 5)
    g.add_edge("Provo", "Logan", 2)
    return g


def main(argv: Sequence[str] | None = None) -> int:
    """Print the graph, its shortest paths from SLC and its MST."""
    print("=== Build Weighted Graph ===")
    g = build_city_graph()
    g.print()
    print()

    print("=== Dijkstra's from SLC ===")
    for city, dist in g.dijkstra("SLC").items():
        print(f"  SLC -> {city}: {dist}")
    print()

    print("=== Prim's MST from SLC ===")
    edges, total = g.prims_mst("SLC")
    for source, target, weight in edges:
        print(f"  {source} --- {target} (weight {weight})")
    print(f"Total MST weight: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())