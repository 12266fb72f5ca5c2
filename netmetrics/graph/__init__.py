"""
Graph module for NetMetrics.

This module provides the NetworkX-backed undirected graph, the structural
metrics computed over it, and helpers that build it from edge lists.
"""

from netmetrics.graph.undirected import UndirectedGraph
from netmetrics.graph.builder import (
    build_graph_from_edges,
    build_graph_from_file,
)

__all__ = [
    "UndirectedGraph",
    "build_graph_from_edges",
    "build_graph_from_file",
]
