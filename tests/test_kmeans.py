"""Tests for one-dimensional k-means."""

import numpy as np
import pytest

from graph_spectral import InvalidClusterRequestError, Kmeans1D


class TestTryToCluster:
    """Tests for fixed-k clustering."""

    def test_two_groups(self):
        """Two well separated groups."""
        labels, centroids = Kmeans1D([0.1, 0.12, 0.9, 0.95]).try_to_cluster(2)
        assert list(labels) == [0, 0, 1, 1]
        assert centroids == pytest.approx([0.11, 0.925])

    def test_ids_follow_centroid_order(self):
        """Cluster ids increase with centroid value regardless of input order."""
        labels, centroids = Kmeans1D([0.9, 0.1, 0.95, 0.12]).try_to_cluster(2)
        assert list(labels) == [1, 0, 1, 0]
        assert centroids[0] < centroids[1]

    def test_three_groups(self):
        """Three groups with uneven sizes."""
        values = [-5.0, -4.9, 0.0, 0.1, 0.2, 0.05, 7.0]
        labels, _ = Kmeans1D(values).try_to_cluster(3)
        assert list(labels) == [0, 0, 1, 1, 1, 1, 2]

    def test_single_cluster(self):
        """k = 1 puts everything in cluster 0."""
        labels, centroids = Kmeans1D([3.0, 1.0, 2.0]).try_to_cluster(1)
        assert list(labels) == [0, 0, 0]
        assert centroids == pytest.approx([2.0])

    def test_k_equals_distinct(self):
        """One cluster per distinct value."""
        labels, _ = Kmeans1D([2.0, 1.0, 2.0, 3.0]).try_to_cluster(3)
        assert list(labels) == [1, 0, 1, 2]

    def test_deterministic(self):
        """Same input, same output."""
        values = np.sin(np.arange(20))
        first, _ = Kmeans1D(values).try_to_cluster(4)
        second, _ = Kmeans1D(values).try_to_cluster(4)
        np.testing.assert_array_equal(first, second)

    def test_labels_in_range(self):
        """All labels lie in [0, k)."""
        labels, centroids = Kmeans1D(np.cos(np.arange(30))).try_to_cluster(5)
        assert labels.min() >= 0
        assert labels.max() < 5
        assert len(centroids) == 5

    def test_zero_clusters_raises(self):
        """k must be positive."""
        with pytest.raises(InvalidClusterRequestError, match=">= 1"):
            Kmeans1D([1.0, 2.0]).try_to_cluster(0)

    def test_too_many_clusters_raises(self):
        """k cannot exceed the number of distinct values."""
        with pytest.raises(InvalidClusterRequestError, match="distinct"):
            Kmeans1D([1.0, 1.0, 1.0]).try_to_cluster(2)

    def test_empty_raises(self):
        """Empty input cannot be clustered."""
        with pytest.raises(InvalidClusterRequestError, match="empty"):
            Kmeans1D([]).try_to_cluster(1)

    def test_nan_raises(self):
        """NaN values are rejected."""
        with pytest.raises(InvalidClusterRequestError):
            Kmeans1D([0.0, float("nan")])


class TestFindBestClustering:
    """Tests for automatic cluster-count selection."""

    def test_three_groups(self):
        """Three tight groups give three clusters."""
        values = [0.0, 0.01, 0.02, 5.0, 5.01, 5.02, 10.0, 10.01, 10.02]
        labels = Kmeans1D(values).find_best_clustering(8)
        assert list(labels) == [0, 0, 0, 1, 1, 1, 2, 2, 2]

    def test_two_groups(self):
        """Two tight groups give two clusters."""
        labels = Kmeans1D([0.1, 0.12, 0.9, 0.95]).find_best_clustering(8)
        assert list(labels) == [0, 0, 1, 1]

    def test_bounded_by_max(self):
        """Labels stay below max_clusters."""
        values = [0.0, 0.01, 0.02, 5.0, 5.01, 5.02, 10.0, 10.01, 10.02]
        labels = Kmeans1D(values).find_best_clustering(2)
        assert set(labels) == {0, 1}

    def test_single_distinct_value(self):
        """Identical values share cluster 0."""
        labels = Kmeans1D([0.5, 0.5, 0.5]).find_best_clustering(8)
        assert list(labels) == [0, 0, 0]

    def test_max_one(self):
        """max_clusters == 1 puts everything in cluster 0."""
        labels = Kmeans1D([0.0, 10.0]).find_best_clustering(1)
        assert list(labels) == [0, 0]

    def test_invalid_max_raises(self):
        """max_clusters must be positive."""
        with pytest.raises(InvalidClusterRequestError, match="max_clusters"):
            Kmeans1D([0.0, 1.0]).find_best_clustering(0)

    def test_empty_raises(self):
        """Empty input cannot be clustered."""
        with pytest.raises(InvalidClusterRequestError):
            Kmeans1D([]).find_best_clustering(4)


class TestSilhouette:
    """Tests for the silhouette score."""

    def test_single_cluster_is_zero(self):
        """One cluster scores 0."""
        kmeans = Kmeans1D([0.0, 1.0, 2.0])
        assert kmeans.silhouette(np.zeros(3, dtype=int)) == 0.0

    def test_perfect_separation(self):
        """Duplicated points far apart score 1."""
        kmeans = Kmeans1D([0.0, 0.0, 10.0, 10.0])
        assert kmeans.silhouette(np.array([0, 0, 1, 1])) == pytest.approx(1.0)

    def test_bad_labelling_is_negative(self):
        """Mixing the groups scores below 0."""
        kmeans = Kmeans1D([0.0, 0.1, 10.0, 10.1])
        assert kmeans.silhouette(np.array([0, 1, 0, 1])) < 0
