"""Weighted undirected graph with Dijkstra shortest paths and Prim's MST."""

from __future__ import annotations

import heapq
import math
import sys
from dataclasses import dataclass
from typing import TextIO

MstEdge = tuple[str, str, int]


@dataclass(frozen=True)
class Edge:
    """An adjacency entry: the neighbouring vertex and the edge's weight."""

    to: str
    weight: int


class WeightedGraph:
    """An undirected graph whose edges carry integer weights."""

    def __init__(self) -> None:
        self._adjacency: dict[str, list[Edge]] = {}

    def add_vertex(self, vertex: str) -> None:
        """Add a vertex; does nothing if it already exists."""
        self._adjacency.setdefault(vertex, [])

    def add_edge(self, source: str, target: str, weight: int) -> None:
        """Add an undirected weighted edge, creating missing vertices."""
        self.add_vertex(source)
        self.add_vertex(target)
        self._adjacency[source].append(Edge(target, weight))
        self._adjacency[target].append(Edge(source, weight))

    def has_vertex(self, vertex: str) -> bool:
        return vertex in self._adjacency

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values()) // 2

    def dijkstra(self, source: str) -> dict[str, float]:
        """Shortest distances from ``source`` to every vertex.

        Unreachable vertices map to ``math.inf``. If ``source`` is not in the
        graph, every vertex is reported as unreachable.
        """
        dist: dict[str, float] = {vertex: math.inf for vertex in self._adjacency}
        if source not in self._adjacency:
            return dist

        dist[source] = 0
        heap: list[tuple[float, str]] = [(0, source)]
        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue  # stale entry
            for edge in self._adjacency[u]:
                new_dist = d + edge.weight
                if new_dist < dist[edge.to]:
                    dist[edge.to] = new_dist
                    heapq.heappush(heap, (new_dist, edge.to))
        return dist

    def prims_mst(self, start: str) -> tuple[list[MstEdge], int]:
        """Minimum spanning tree grown from ``start``.

        Returns the accepted ``(from, to, weight)`` edges in order and their
        total weight. An unknown ``start`` yields an empty tree.
        """
        mst_edges: list[MstEdge] = []
        total = 0
        if start not in self._adjacency:
            return mst_edges, total

        in_mst = {start}
        heap: list[tuple[int, str, str]] = [
            (edge.weight, start, edge.to) for edge in self._adjacency[start]
        ]
        heapq.heapify(heap)
        vertex_total = self.vertex_count()

        while heap and len(in_mst) < vertex_total:
            weight, source, target = heapq.heappop(heap)
            if target in in_mst:
                continue
            mst_edges.append((source, target, weight))
            total += weight
            in_mst.add(target)
            for edge in self._adjacency[target]:
                if edge.to not in in_mst:
                    heapq.heappush(heap, (edge.weight, target, edge.to))

        return mst_edges, total

    def format(self) -> str:
        """Adjacency listing, one ``vertex: to(weight), ...`` line per vertex."""
        lines = []
        for vertex, edges in self._adjacency.items():
            neighbours = ", ".join(f"{edge.to}({edge.weight})" for edge in edges)
            lines.append(f"{vertex}: {neighbours}")
        return "".join(line + "\n" for line in lines)

    def print(self, file: TextIO | None = None) -> None:
        """Write the adjacency listing to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.format())