"""
Edge-List Loader for NetMetrics

This module reads whitespace-separated edge lists (the SNAP format used by
datasets such as facebook_combined.txt) and cleans the raw pairs before
they are handed to the graph.

File Format:
    One edge per line, two node labels separated by whitespace:

        0 1
        0 2
        1 2

    Lines that don't split into exactly two tokens (blank lines, "#"
    comment headers, lines with extra columns) are skipped.

Design Decisions:
    - Labels are kept as strings; no numeric conversion is imposed
    - Loading and cleaning are separate steps so raw counts can be reported
    - I/O and decoding failures surface as DatasetLoadError
"""

import logging
from pathlib import Path
from typing import Iterable

from netmetrics.models import DatasetLoadError, NodeId

log = logging.getLogger(__name__)


def parse_edges(text: str) -> list[tuple[str, str]]:
    """
    Parse edge pairs from edge-list text.

    Args:
        text: Contents of an edge-list file

    Returns:
        List of (source, target) label pairs in file order

    Example:
        >>> parse_edges("0 1\\n1 2\\n")
        [('0', '1'), ('1', '2')]
    """
    edges: list[tuple[str, str]] = []
    skipped = 0

    for line in text.splitlines():
        tokens = line.split()
        if len(tokens) == 2:
            edges.append((tokens[0], tokens[1]))
        elif tokens:
            skipped += 1

    if skipped:
        log.debug("Skipped %d line(s) without exactly two labels", skipped)

    return edges


def load_dataset(file_path: Path | str) -> list[tuple[str, str]]:
    """
    Load raw edges from an edge-list file.

    Args:
        file_path: Path to the edge-list file

    Returns:
        List of (source, target) pairs, duplicates included

    Raises:
        DatasetLoadError: If the file doesn't exist, isn't a regular file,
            or can't be read as UTF-8 text
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise DatasetLoadError(file_path, "Dataset not found")

    if not file_path.is_file():
        raise DatasetLoadError(file_path, "Not a file")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetLoadError(file_path, f"Could not read dataset ({e})") from e

    edges = parse_edges(text)
    log.info("Loaded %d raw edges from %s", len(edges), file_path)
    return edges


def _pair_key(pair: tuple[NodeId, NodeId]) -> tuple[str, str, str, str]:
    source, target = pair
    return (str(source), str(target), type(source).__name__, type(target).__name__)


def clean_dataset(
    edges: Iterable[tuple[NodeId, NodeId]],
    normalize: bool = False,
    drop_self_loops: bool = False,
) -> list[tuple[NodeId, NodeId]]:
    """
    Remove duplicate edges.

    Pairs are sorted and exact duplicates dropped. With normalize, each
    pair is first reordered so the smaller label comes first, which also
    collapses reversed duplicates like ("b", "a") and ("a", "b").

    Labels are ordered by their string form, so pairs mixing label types
    (e.g. ints and strings) can still be sorted.

    Args:
        edges: Raw (source, target) pairs
        normalize: Put each pair's endpoints in ascending order
        drop_self_loops: Remove pairs whose endpoints are equal

    Returns:
        Sorted list of unique pairs
    """
    pairs = list(edges)
    raw_count = len(pairs)

    if drop_self_loops:
        pairs = [(source, target) for source, target in pairs if source != target]
        if len(pairs) != raw_count:
            log.debug("Dropped %d self-loop(s)", raw_count - len(pairs))

    if normalize:
        pairs = [
            (source, target) if str(source) <= str(target) else (target, source)
            for source, target in pairs
        ]

    unique = sorted(set(pairs), key=_pair_key)
    log.debug("Cleaned %d raw edges down to %d unique edges", raw_count, len(unique))
    return unique
