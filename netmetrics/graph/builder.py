"""
Graph Builder for NetMetrics

This module connects the edge-list loader to the graph core: it loads raw
pairs, cleans them and populates an UndirectedGraph.

Academic Context:
    Input: Path to an edge-list file, or an iterable of edge pairs
    Transformation: Load, deduplicate, add_edge for each pair
    Output: UndirectedGraph plus load statistics
    Limitation: The whole file is read into memory before building
"""

import logging
import time
from pathlib import Path
from typing import Iterable

from netmetrics.graph.undirected import UndirectedGraph
from netmetrics.loader import load_dataset, clean_dataset
from netmetrics.models import LoadResult, NodeId

log = logging.getLogger(__name__)


def build_graph_from_edges(edges: Iterable[tuple[NodeId, NodeId]]) -> UndirectedGraph:
    """
    Build an UndirectedGraph from edge pairs.

    Args:
        edges: (source, target) pairs

    Returns:
        A graph containing every pair as an undirected edge

    Example:
        >>> graph = build_graph_from_edges([("A", "B"), ("B", "C")])
        >>> graph.node_count, graph.edge_count
        (3, 2)
    """
    return UndirectedGraph.from_edges(edges)


def build_graph_from_file(
    file_path: Path | str,
    normalize: bool = False,
    drop_self_loops: bool = False,
) -> LoadResult:
    """
    Load an edge-list file, clean it and build a graph.

    Args:
        file_path: Path to the edge-list file
        normalize: Collapse reversed duplicate pairs before building
        drop_self_loops: Leave out edges from a node to itself

    Returns:
        LoadResult containing the graph and raw/unique edge counts

    Raises:
        DatasetLoadError: If the file can't be loaded
    """
    start_time = time.time()
    file_path = Path(file_path)

    raw_edges = load_dataset(file_path)
    cleaned = clean_dataset(
        raw_edges,
        normalize=normalize,
        drop_self_loops=drop_self_loops,
    )
    graph = build_graph_from_edges(cleaned)

    result = LoadResult(
        graph=graph,
        source=file_path,
        raw_edge_count=len(raw_edges),
        unique_edge_count=len(cleaned),
        load_time_seconds=time.time() - start_time,
    )
    log.info(
        "Graph constructed with %d nodes and %d edges in %.2fs",
        graph.node_count,
        graph.edge_count,
        result.load_time_seconds,
    )
    return result
