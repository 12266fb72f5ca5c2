"""
Test fixtures for NetMetrics.

This module provides sample edge lists and helper functions
for testing the graph core, loader and CLI.
"""

from pathlib import Path

from netmetrics.graph import UndirectedGraph

DATA_DIR = Path(__file__).parent / "data"

# Two components: {0..5} and {6, 7}; one duplicate and one reversed pair
SAMPLE_EDGES_PATH = DATA_DIR / "sample_edges.txt"

# Scenario edge lists
PATH_AB_BC = [("A", "B"), ("B", "C")]
PATH_ABCD = [("A", "B"), ("B", "C"), ("C", "D")]
TRIANGLE = [("A", "B"), ("B", "C"), ("C", "A")]

# A 4-clique: every neighborhood is complete
CLIQUE_4 = [
    ("A", "B"),
    ("A", "C"),
    ("A", "D"),
    ("B", "C"),
    ("B", "D"),
    ("C", "D"),
]

STAR = [("hub", "a"), ("hub", "b"), ("hub", "c"), ("hub", "d")]

DISCONNECTED = [("A", "B"), ("B", "C"), ("X", "Y")]

SAMPLE_EDGE_LIST = """\
# Undirected sample graph
# FromNodeId ToNodeId
0 1
0 2
0 3
1 2
1 2
2 1
3 4
4 5
6 7
not an edge line
"""


def make_graph(edges) -> UndirectedGraph:
    """Build a graph from a list of edge pairs."""
    graph = UndirectedGraph()
    for source, target in edges:
        graph.add_edge(source, target)
    return graph
