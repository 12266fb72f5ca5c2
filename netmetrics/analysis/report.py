"""
Graph Analysis for NetMetrics

This module aggregates the per-node metrics of an UndirectedGraph into a
single GraphReport, the same set of figures printed by `netm analyze`.

Report Contents:
    - Node and edge counts
    - Degree statistics, plus the highest- and lowest-degree nodes
    - A preview of the degree distribution
    - BFS distances from a start node, reach and eccentricity
    - Local clustering of one node and the graph-wide average

Design Decisions:
    - Deterministic: previews and ties follow node label order, with
      decimal-digit labels compared numerically ("2" before "10")
    - Total: an absent start node or an empty graph still yields a report
"""

import logging
from typing import Optional

from netmetrics.graph.undirected import UndirectedGraph
from netmetrics.models import GraphReport, NodeId

log = logging.getLogger(__name__)


# Defaults used by the report and the CLI
DEFAULT_START_NODE = "0"
DEFAULT_PREVIEW_SIZE = 10


def label_key(node: NodeId) -> tuple:
    """
    Sort key that orders node labels naturally.

    Labels made only of decimal digits sort numerically and before any
    other label; every other label (including "²") sorts by its string form.
    """
    label = str(node)
    if label.isdecimal():
        return (0, int(label), label)
    return (1, 0, label)


def top_degree_nodes(graph: UndirectedGraph, limit: int) -> list[tuple[NodeId, int]]:
    """
    Get the nodes with the largest degree.

    Args:
        graph: The graph to inspect
        limit: Maximum number of nodes to return

    Returns:
        (node, degree) pairs by descending degree, ties in label order

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    ranked = sorted(
        graph.degree_distribution().items(),
        key=lambda item: (-item[1], label_key(item[0])),
    )
    return ranked[:limit]


def degree_histogram(graph: UndirectedGraph) -> dict[int, int]:
    """
    Count how many nodes have each degree.

    Returns:
        Mapping from degree to node count, in ascending degree order
    """
    histogram: dict[int, int] = {}
    for degree in graph.degree_distribution().values():
        histogram[degree] = histogram.get(degree, 0) + 1
    return dict(sorted(histogram.items()))


def _extreme_degree(
    degrees: dict[NodeId, int],
    highest: bool,
) -> Optional[tuple[NodeId, int]]:
    if not degrees:
        return None
    sign = -1 if highest else 1
    node = min(degrees, key=lambda n: (sign * degrees[n], label_key(n)))
    return node, degrees[node]


def analyze_graph(
    graph: UndirectedGraph,
    start_node: NodeId = DEFAULT_START_NODE,
    sample_node: Optional[NodeId] = None,
    preview: int = DEFAULT_PREVIEW_SIZE,
) -> GraphReport:
    """
    Compute the full set of structural metrics for a graph.

    Args:
        graph: The graph to analyze
        start_node: Source node for the BFS
        sample_node: Node whose clustering coefficient is reported;
                     defaults to start_node
        preview: Number of degree and distance entries to keep

    Returns:
        GraphReport with counts, degree, distance and clustering figures

    Raises:
        ValueError: If preview is negative

    Example:
        >>> graph = UndirectedGraph.from_edges([("A", "B"), ("B", "C")])
        >>> report = analyze_graph(graph, start_node="A")
        >>> report.eccentricity
        2
    """
    if preview < 0:
        raise ValueError(f"preview must be >= 0, got {preview}")

    if sample_node is None:
        sample_node = start_node

    if start_node not in graph:
        log.warning("BFS start node %r is not in the graph", start_node)

    degrees = graph.degree_distribution()
    distances = graph.bfs(start_node)

    degree_preview = sorted(degrees.items(), key=lambda item: label_key(item[0]))
    distance_preview = sorted(distances.items(), key=lambda item: label_key(item[0]))

    log.debug("Computing clustering coefficients for %d nodes", graph.node_count)

    return GraphReport(
        node_count=graph.node_count,
        edge_count=graph.edge_count,
        degree_stats=graph.degree_statistics(),
        highest_degree=_extreme_degree(degrees, highest=True),
        lowest_degree=_extreme_degree(degrees, highest=False),
        degree_preview=degree_preview[:preview],
        start_node=start_node,
        distance_preview=distance_preview[:preview],
        reached_count=len(distances) if start_node in graph else 0,
        eccentricity=max(distances.values()),
        sample_node=sample_node,
        sample_clustering=graph.clustering_coefficient(sample_node),
        average_clustering=graph.average_clustering_coefficient(),
    )
