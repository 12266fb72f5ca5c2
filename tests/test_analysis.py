"""
Tests for the analysis module.

Tests report generation, degree rankings and histograms.
"""

import pytest

from netmetrics.analysis import analyze_graph, degree_histogram, label_key, top_degree_nodes
from netmetrics.graph import UndirectedGraph, build_graph_from_file
from netmetrics.models import GraphReport
from tests.fixtures import PATH_ABCD, SAMPLE_EDGES_PATH, STAR, make_graph


@pytest.fixture
def sample_graph():
    """Graph built from the bundled sample edge list."""
    return build_graph_from_file(SAMPLE_EDGES_PATH).graph


class TestLabelOrdering:
    """Tests for the natural label sort key."""

    def test_numeric_labels_sort_numerically(self):
        """Test that "2" sorts before "10"."""
        assert sorted(["10", "2", "1"], key=label_key) == ["1", "2", "10"]

    def test_numeric_before_text(self):
        """Test that all-digit labels come before other labels."""
        assert sorted(["b", "3", "a"], key=label_key) == ["3", "a", "b"]

    def test_non_string_labels(self):
        """Test that integers and strings can be ordered together."""
        assert sorted([12, "x", 3], key=label_key) == [3, 12, "x"]

    def test_superscript_digits_sort_as_text(self):
        """Test that non-decimal digit characters like "²" sort as text."""
        assert sorted(["²", "10", "1"], key=label_key) == ["1", "10", "²"]

    def test_report_with_superscript_label(self, tmp_path):
        """Test that a graph with a "²" node still produces a report."""
        path = tmp_path / "edges.txt"
        path.write_text("0 ²\n0 1\n", encoding="utf-8")
        graph = build_graph_from_file(path).graph

        report = analyze_graph(graph, start_node="0")

        assert report.node_count == 3
        assert report.degree_preview == [("0", 2), ("1", 1), ("²", 1)]
        assert report.distance_preview == [("0", 0), ("1", 1), ("²", 1)]
        assert top_degree_nodes(graph, 3) == [("0", 2), ("1", 1), ("²", 1)]


class TestDegreeRanking:
    """Tests for top_degree_nodes and degree_histogram."""

    def test_top_nodes(self, sample_graph):
        """Test the two highest-degree nodes of the sample."""
        assert top_degree_nodes(sample_graph, 2) == [("0", 3), ("1", 2)]

    def test_top_nodes_limit_beyond_size(self):
        """Test that a large limit returns every node."""
        graph = make_graph(STAR)

        assert len(top_degree_nodes(graph, 100)) == 5

    def test_top_nodes_negative_limit(self):
        """Test that a negative limit raises ValueError."""
        with pytest.raises(ValueError):
            top_degree_nodes(make_graph(STAR), -1)

    def test_histogram(self, sample_graph):
        """Test the degree histogram of the sample."""
        assert degree_histogram(sample_graph) == {1: 3, 2: 4, 3: 1}

    def test_histogram_empty(self):
        """Test the histogram of an empty graph."""
        assert degree_histogram(UndirectedGraph()) == {}


class TestAnalyzeGraph:
    """Tests for the full structural report."""

    def test_sample_report(self, sample_graph):
        """Test every figure in the report for the sample graph."""
        report = analyze_graph(sample_graph, start_node="0", preview=3)

        assert isinstance(report, GraphReport)
        assert report.node_count == 8
        assert report.edge_count == 7
        assert report.degree_stats == (1, 3, 1.75)
        assert report.highest_degree == ("0", 3)
        assert report.lowest_degree == ("5", 1)
        assert report.degree_preview == [("0", 3), ("1", 2), ("2", 2)]
        assert report.distance_preview == [("0", 0), ("1", 1), ("2", 1)]
        assert report.reached_count == 6
        assert report.eccentricity == 3
        assert report.reached_percentage == pytest.approx(75.0)
        assert report.sample_node == "0"
        assert report.sample_clustering == pytest.approx(1 / 3)
        assert report.average_clustering == pytest.approx(7 / 24)

    def test_sample_node_override(self, sample_graph):
        """Test reporting clustering for a node other than the start."""
        report = analyze_graph(sample_graph, start_node="0", sample_node="1")

        assert report.sample_node == "1"
        assert report.sample_clustering == 1.0

    def test_absent_start_node(self):
        """Test that an absent start node still produces a report."""
        graph = make_graph(PATH_ABCD)

        report = analyze_graph(graph, start_node="Z")

        assert report.reached_count == 0
        assert report.eccentricity == 0
        assert report.distance_preview == [("Z", 0)]
        assert report.sample_clustering == 0.0

    def test_empty_graph(self):
        """Test the report for an empty graph."""
        report = analyze_graph(UndirectedGraph())

        assert report.node_count == 0
        assert report.degree_stats == (0, 0, 0.0)
        assert report.highest_degree is None
        assert report.lowest_degree is None
        assert report.degree_preview == []
        assert report.reached_percentage == 0.0
        assert report.density == 0.0
        assert report.average_clustering == 0.0

    def test_density(self):
        """Test density of a path on four nodes."""
        report = analyze_graph(make_graph(PATH_ABCD), start_node="A")

        assert report.density == pytest.approx(3 / 6)

    def test_negative_preview(self):
        """Test that a negative preview raises ValueError."""
        with pytest.raises(ValueError):
            analyze_graph(make_graph(STAR), preview=-1)
