"""
Undirected Graph for NetMetrics

This module holds the in-memory adjacency structure that every metric is
computed over. Nodes are arbitrary hashable labels and edges are unordered
pairs stored as mutual neighbor-set membership.

Design Decisions:
    - Uses a NetworkX Graph as the adjacency store (dict of neighbor dicts)
    - All mutation goes through add_edge so the structure stays symmetric
    - Metrics are computed directly from neighbor sets, not from NetworkX
      algorithms, so degree and edge counts follow neighbor-set sizes
      (a self-loop counts once in its node's neighbor set)
    - Every query is total: absent nodes and empty graphs return
      0, 0.0 or a singleton mapping instead of raising

Academic Context:
    Input: Sequence of (NodeId, NodeId) pairs
    Transformation: Symmetric adjacency-set construction
    Output: Counts, BFS distances, clustering coefficients, degree summaries
    Limitation: Static graph; no deletion, weights or direction

Graph Properties:
    - Undirected: add_edge(u, v) and add_edge(v, u) are the same edge
    - Idempotent construction: duplicate edges are absorbed
    - Self-loops are kept as given
    - Every node has degree >= 1 (nodes only appear through edges)
"""

import logging
from collections import deque
from typing import Iterable, Iterator

import networkx as nx

from netmetrics.models import DegreeStatistics, NodeId

log = logging.getLogger(__name__)


class UndirectedGraph:
    """
    An undirected, unweighted graph over hashable node labels.

    Wraps a NetworkX Graph to provide the analytic operations used by
    the reporting layer:
    - Building the graph edge by edge
    - Node and edge counts
    - Breadth-first hop distances
    - Local and average clustering coefficients
    - Degree distribution and statistics

    Usage:
        graph = UndirectedGraph()
        graph.add_edge("A", "B")
        graph.add_edge("B", "C")
        graph.bfs("A")  # {"A": 0, "B": 1, "C": 2}
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._graph: nx.Graph = nx.Graph()

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[NodeId, NodeId]]) -> "UndirectedGraph":
        """
        Build a graph from an iterable of edge pairs.

        Args:
            edges: (source, target) pairs; order and duplicates don't matter

        Returns:
            A new UndirectedGraph containing every edge
        """
        graph = cls()
        added = 0
        for source, target in edges:
            graph.add_edge(source, target)
            added += 1
        log.debug(
            "Built graph from %d edge pairs: %d nodes, %d edges",
            added,
            graph.node_count,
            graph.edge_count,
        )
        return graph

    @property
    def graph(self) -> nx.Graph:
        """Read-only view of the underlying NetworkX graph."""
        return self._graph.copy(as_view=True)

    @property
    def node_count(self) -> int:
        """Return the number of distinct nodes in the graph."""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """
        Return the number of distinct undirected edges.

        Computed as half the sum of all neighbor-set sizes, which relies
        on the adjacency structure being symmetric.
        """
        return sum(len(neighbors) for neighbors in self._graph.adj.values()) // 2

    def add_edge(self, source: NodeId, target: NodeId) -> None:
        """
        Add an undirected edge between two nodes.

        Either node is created if it doesn't exist yet. Adding an edge
        that is already present leaves the graph unchanged.

        Args:
            source: One endpoint
            target: The other endpoint
        """
        self._graph.add_edge(source, target)

    def __contains__(self, node: NodeId) -> bool:
        return node in self._graph

    def __len__(self) -> int:
        return self.node_count

    def nodes(self) -> Iterator[NodeId]:
        """
        Iterate over all nodes.

        Yields:
            Each node label (in no particular order)
        """
        yield from self._graph.adj

    def neighbors(self, node: NodeId) -> frozenset:
        """
        Get the neighbor set of a node.

        Args:
            node: The node to look up

        Returns:
            The node's neighbors, empty if the node is absent
        """
        if node not in self._graph:
            return frozenset()
        return frozenset(self._graph.adj[node])

    def has_edge(self, source: NodeId, target: NodeId) -> bool:
        """Check whether source and target are directly connected."""
        return self._graph.has_edge(source, target)

    def degree(self, node: NodeId) -> int:
        """Size of a node's neighbor set, 0 if the node is absent."""
        if node not in self._graph:
            return 0
        return len(self._graph.adj[node])

    def bfs(self, start: NodeId) -> dict[NodeId, int]:
        """
        Compute hop distances from a start node by breadth-first search.

        Nodes not reachable from start are left out of the result. A start
        node that isn't in the graph is still reported at distance 0.

        Args:
            start: The source node

        Returns:
            Mapping from each reached node to its shortest hop distance
        """
        distances: dict[NodeId, int] = {start: 0}
        if start not in self._graph:
            return distances

        adjacency = self._graph.adj
        queue = deque([start])
        while queue:
            current = queue.popleft()
            next_distance = distances[current] + 1
            for neighbor in adjacency[current]:
                if neighbor not in distances:
                    distances[neighbor] = next_distance
                    queue.append(neighbor)

        return distances

    def clustering_coefficient(self, node: NodeId) -> float:
        """
        Compute the local clustering coefficient of a node.

        The coefficient is the number of edges among the node's neighbors
        divided by the k*(k-1)/2 possible ones. Nodes with fewer than two
        neighbors, and nodes not in the graph, have a coefficient of 0.0.

        Args:
            node: The node to evaluate

        Returns:
            A value in [0.0, 1.0]
        """
        if node not in self._graph:
            return 0.0

        adjacency = self._graph.adj
        neighbors = list(adjacency[node])
        k = len(neighbors)
        if k < 2:
            return 0.0

        links = 0
        for i in range(k):
            neighbors_of_i = adjacency[neighbors[i]]
            for j in range(i + 1, k):
                if neighbors[j] in neighbors_of_i:
                    links += 1

        possible = k * (k - 1) / 2
        return links / possible

    def average_clustering_coefficient(self) -> float:
        """
        Mean local clustering coefficient over every node.

        Returns:
            The average coefficient, 0.0 for an empty graph
        """
        if self.node_count == 0:
            return 0.0
        total = sum(self.clustering_coefficient(node) for node in self._graph.adj)
        return total / self.node_count

    def degree_distribution(self) -> dict[NodeId, int]:
        """
        Map every node to its degree.

        Returns:
            Dictionary from node label to neighbor-set size
        """
        return {node: len(neighbors) for node, neighbors in self._graph.adj.items()}

    def degree_statistics(self) -> DegreeStatistics:
        """
        Summarize the degree distribution.

        Returns:
            (min_degree, max_degree, average_degree); (0, 0, 0.0) when
            the graph has no nodes
        """
        degrees = [len(neighbors) for neighbors in self._graph.adj.values()]
        if not degrees:
            return DegreeStatistics(0, 0, 0.0)
        return DegreeStatistics(
            min(degrees),
            max(degrees),
            sum(degrees) / len(degrees),
        )
