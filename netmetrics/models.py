"""
Core Data Models for NetMetrics

This module defines the value types shared by the loader, the graph core
and the reporting layer:
- DegreeStatistics: (min, max, average) degree summary
- LoadResult: Outcome of loading an edge list and building a graph
- GraphReport: Aggregated metrics for one analysis run
- DatasetLoadError: Raised when an edge-list file cannot be read

These models are designed to be:
- Plain values (tuples, dicts, numbers) so callers can print or compare them
- Free of any reference back into the graph's adjacency structure
"""

from dataclasses import dataclass, field
from typing import Hashable, NamedTuple, Optional, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from netmetrics.graph.undirected import UndirectedGraph


NodeId = Hashable


class DatasetLoadError(Exception):
    """
    Raised when an edge-list dataset cannot be loaded.

    Attributes:
        path: The path that failed to load
    """

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class DegreeStatistics(NamedTuple):
    """
    Minimum, maximum and average degree across all nodes.

    A NamedTuple so it compares equal to a plain ``(min, max, average)``
    tuple. An empty graph reports ``(0, 0, 0.0)``.
    """

    min_degree: int
    max_degree: int
    average_degree: float


@dataclass
class LoadResult:
    """
    Result of loading an edge list and building a graph from it.

    Attributes:
        graph: The constructed undirected graph
        source: Path the edges were read from
        raw_edge_count: Number of edge lines accepted by the loader
        unique_edge_count: Number of edges left after cleaning
        load_time_seconds: Wall time for load, clean and build
    """

    graph: "UndirectedGraph"
    source: Optional[Path] = None
    raw_edge_count: int = 0
    unique_edge_count: int = 0
    load_time_seconds: float = 0.0

    @property
    def duplicate_count(self) -> int:
        """Number of raw edges removed by cleaning."""
        return self.raw_edge_count - self.unique_edge_count


@dataclass
class GraphReport:
    """
    Summary of structural metrics for one graph.

    Attributes:
        node_count: Number of distinct nodes
        edge_count: Number of distinct undirected edges
        degree_stats: Min/max/average degree
        highest_degree: (node, degree) with the largest degree, None if empty
        lowest_degree: (node, degree) with the smallest degree, None if empty
        degree_preview: First few (node, degree) pairs in label order
        start_node: Source node of the BFS
        distance_preview: First few (node, distance) pairs in label order
        reached_count: Number of nodes reached from start_node
        eccentricity: Largest BFS distance from start_node
        sample_node: Node whose local clustering coefficient was computed
        sample_clustering: Clustering coefficient of sample_node
        average_clustering: Mean clustering coefficient over all nodes
    """

    node_count: int = 0
    edge_count: int = 0
    degree_stats: DegreeStatistics = DegreeStatistics(0, 0, 0.0)
    highest_degree: Optional[tuple[NodeId, int]] = None
    lowest_degree: Optional[tuple[NodeId, int]] = None
    degree_preview: list[tuple[NodeId, int]] = field(default_factory=list)
    start_node: Optional[NodeId] = None
    distance_preview: list[tuple[NodeId, int]] = field(default_factory=list)
    reached_count: int = 0
    eccentricity: int = 0
    sample_node: Optional[NodeId] = None
    sample_clustering: float = 0.0
    average_clustering: float = 0.0

    @property
    def reached_percentage(self) -> float:
        """Percentage of nodes reachable from the BFS start."""
        if self.node_count == 0:
            return 0.0
        return (self.reached_count / self.node_count) * 100

    @property
    def density(self) -> float:
        """Fraction of possible undirected edges that are present."""
        if self.node_count < 2:
            return 0.0
        possible = self.node_count * (self.node_count - 1) / 2
        return self.edge_count / possible
