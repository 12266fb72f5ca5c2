"""
NetMetrics

Core package for loading undirected edge lists, building an in-memory
graph, and computing degree, distance and clustering metrics over it.
"""

from netmetrics.models import DatasetLoadError, DegreeStatistics, GraphReport, LoadResult
from netmetrics.graph import UndirectedGraph

__all__ = [
    "DatasetLoadError",
    "DegreeStatistics",
    "GraphReport",
    "LoadResult",
    "UndirectedGraph",
]
__version__ = "0.1.0"
