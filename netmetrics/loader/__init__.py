"""
Loader module for NetMetrics.

This module reads whitespace-separated edge-list files and removes
duplicate pairs before graph construction.
"""

from netmetrics.loader.edgelist import (
    parse_edges,
    load_dataset,
    clean_dataset,
)

__all__ = [
    "parse_edges",
    "load_dataset",
    "clean_dataset",
]
