"""Tests for cluster assignment and write-back."""

import numpy as np
import pytest

from graph_spectral import (
    AUTOMATIC_CLUSTERS,
    Graph,
    InvalidClusterRequestError,
    InvalidGraphError,
    NodeIndex,
    assign_clusters,
    write_clusters,
)


class TestAssignClusters:
    """Tests for the pure clustering step."""

    def test_fixed_k(self):
        """A fixed count uses exactly that many clusters."""
        labels = assign_clusters([-0.5, -0.4, 0.4, 0.5], requested_nb_clusters=2)
        assert list(labels) == [0, 0, 1, 1]

    def test_automatic(self):
        """The sentinel -1 selects the count automatically."""
        fiedler = [-0.6, -0.59, 0.0, 0.01, 0.6, 0.61]
        labels = assign_clusters(fiedler, requested_nb_clusters=AUTOMATIC_CLUSTERS)
        assert list(labels) == [0, 0, 1, 1, 2, 2]

    def test_automatic_respects_max(self):
        """Automatic selection is bounded by max_clusters."""
        fiedler = [-0.6, -0.59, 0.0, 0.01, 0.6, 0.61]
        labels = assign_clusters(fiedler, max_clusters=2)
        assert set(labels) <= {0, 1}

    def test_length_matches_input(self):
        """One id per value."""
        fiedler = np.linspace(-1, 1, 11)
        assert len(assign_clusters(fiedler, requested_nb_clusters=3)) == 11

    def test_too_many_clusters(self):
        """Collaborator errors propagate."""
        with pytest.raises(InvalidClusterRequestError):
            assign_clusters([0.1, 0.1, 0.2], requested_nb_clusters=3)

    def test_zero_clusters(self):
        """k = 0 is rejected."""
        with pytest.raises(InvalidClusterRequestError):
            assign_clusters([0.1, 0.2], requested_nb_clusters=0)


class TestWriteClusters:
    """Tests for writing ids onto nodes."""

    def test_row_to_node(self):
        """Row i goes to node i."""
        graph = Graph(nodes=[{"id": "x"}, {"id": "y"}, {"id": "z"}])
        write_clusters(NodeIndex.from_graph(graph), np.array([2, 0, 1]))
        assert graph.clusters() == {"x": 2, "y": 0, "z": 1}

    def test_plain_ints(self):
        """numpy integers are stored as Python ints."""
        graph = Graph(nodes=[{}, {}])
        write_clusters(NodeIndex.from_graph(graph), np.array([1, 0], dtype=np.int64))
        assert all(type(node.cluster) is int for node in graph.get_nodes())

    def test_overwrites(self):
        """Existing labels are replaced."""
        graph = Graph(nodes=[{"cluster": 5}, {"cluster": 5}])
        write_clusters(NodeIndex.from_graph(graph), [0, 1])
        assert [node.cluster for node in graph.get_nodes()] == [0, 1]

    def test_length_mismatch(self):
        """Misaligned assignments raise without touching nodes."""
        graph = Graph(nodes=[{}, {}, {}])
        with pytest.raises(InvalidGraphError, match="2 cluster ids for 3 nodes"):
            write_clusters(NodeIndex.from_graph(graph), [0, 1])
        assert all(node.cluster is None for node in graph.get_nodes())
