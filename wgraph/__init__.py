"""Weighted undirected graphs with Dijkstra shortest paths, Prim minimum spanning trees and a small demo."""

__version__ = "0.1.0"
__all__ = ["graph", "demo"]