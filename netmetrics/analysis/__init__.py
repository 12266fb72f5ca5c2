"""
Analysis module for NetMetrics.

This module turns graph metrics into reports: degree rankings,
degree histograms, and the full structural summary of a graph.
"""

from netmetrics.analysis.report import (
    DEFAULT_PREVIEW_SIZE,
    DEFAULT_START_NODE,
    analyze_graph,
    degree_histogram,
    label_key,
    top_degree_nodes,
)

__all__ = [
    "DEFAULT_PREVIEW_SIZE",
    "DEFAULT_START_NODE",
    "analyze_graph",
    "degree_histogram",
    "label_key",
    "top_degree_nodes",
]
