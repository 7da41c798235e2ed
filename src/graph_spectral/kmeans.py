"""
One-dimensional k-means.

Clusters a sequence of scalars (the Fiedler vector) with Lloyd's
algorithm. Seeding is deterministic: the sorted distinct values are split
into k groups of equal count and each group's mean is an initial centroid.
Cluster ids are renumbered so that they increase with centroid value.

Automatic selection tries k = 2 .. max_clusters and keeps the clustering
with the highest mean silhouette.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .validation import (
    InvalidClusterRequestError,
    validate_cluster_count,
    validate_max_clusters,
)


class Kmeans1D:
    """
    k-means over one-dimensional data.

    Example:
        kmeans = Kmeans1D([0.1, 0.12, 0.9, 0.95])
        labels, centroids = kmeans.try_to_cluster(2)   # [0, 0, 1, 1]
        labels = kmeans.find_best_clustering(8)         # [0, 0, 1, 1]

    Raises:
        InvalidClusterRequestError: If values contain NaN or infinity
    """

    def __init__(
        self,
        values: Union[Sequence[float], np.ndarray],
        max_iterations: int = 100,
        tolerance: float = 1e-9,
    ) -> None:
        self._values: np.ndarray = np.asarray(values, dtype=float).ravel()
        if not np.all(np.isfinite(self._values)):
            raise InvalidClusterRequestError("Cannot cluster NaN or infinite values")
        self._distinct: np.ndarray = np.unique(self._values)
        self._max_iterations: int = max(1, int(max_iterations))
        self._tolerance: float = float(tolerance)

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def distinct_count(self) -> int:
        return int(self._distinct.shape[0])

    # -------------------------------------------------------------------------
    # Fixed k
    # -------------------------------------------------------------------------

    def try_to_cluster(self, k: int) -> tuple[np.ndarray, np.ndarray]:
        """
        Partition the values into k clusters.

        Args:
            k: Number of clusters

        Returns:
            (assignments, centroids): integer labels in [0, k) per value,
            and the k centroids in increasing order

        Raises:
            InvalidClusterRequestError: If k <= 0, the data is empty, or k
                exceeds the number of distinct values
        """
        k = validate_cluster_count(int(k), self.distinct_count)

        centroids = np.array([group.mean() for group in np.array_split(self._distinct, k)])
        labels = self._nearest(centroids)

        for _ in range(self._max_iterations):
            updated = centroids.copy()
            for c in range(k):
                members = self._values[labels == c]
                if members.size:
                    updated[c] = members.mean()
                else:
                    # Empty cluster: reseed on the value farthest from its centroid
                    far = int(np.argmax(np.abs(self._values - centroids[labels])))
                    updated[c] = self._values[far]
            shift = float(np.max(np.abs(updated - centroids)))
            centroids = updated
            labels = self._nearest(centroids)
            if shift <= self._tolerance:
                break

        order = np.argsort(centroids, kind="stable")
        rank = np.empty(k, dtype=int)
        rank[order] = np.arange(k)
        return rank[labels], centroids[order]

    def _nearest(self, centroids: np.ndarray) -> np.ndarray:
        return np.argmin(np.abs(self._values[:, None] - centroids[None, :]), axis=1)

    # -------------------------------------------------------------------------
    # Automatic k
    # -------------------------------------------------------------------------

    def find_best_clustering(self, max_clusters: int) -> np.ndarray:
        """
        Choose the cluster count automatically and cluster the values.

        Tries every k from 2 to min(max_clusters, distinct values) and keeps
        the labels with the highest silhouette; ties keep the smaller k.
        With one distinct value, or max_clusters == 1, all values share
        cluster 0.

        Returns:
            Integer labels in [0, max_clusters)

        Raises:
            InvalidClusterRequestError: If max_clusters < 1 or the data is empty
        """
        max_clusters = validate_max_clusters(int(max_clusters))
        if self._values.size == 0:
            raise InvalidClusterRequestError("Cannot cluster an empty sequence")

        upper = min(max_clusters, self.distinct_count)
        best_labels = np.zeros(self._values.shape[0], dtype=int)
        best_score = -np.inf

        for k in range(2, upper + 1):
            labels, _ = self.try_to_cluster(k)
            score = self.silhouette(labels)
            if score > best_score:
                best_labels, best_score = labels, score

        return best_labels

    def silhouette(self, labels: np.ndarray) -> float:
        """
        Mean silhouette coefficient of a labelling.

        Points alone in their cluster score 0. Returns 0 when fewer than
        two clusters are present.
        """
        labels = np.asarray(labels)
        clusters = np.unique(labels)
        if clusters.shape[0] < 2:
            return 0.0

        dist = np.abs(self._values[:, None] - self._values[None, :])
        n = self._values.shape[0]
        scores = np.zeros(n)

        for i in range(n):
            same = labels == labels[i]
            same_count = int(np.sum(same)) - 1
            if same_count == 0:
                continue
            a = float(np.sum(dist[i, same])) / same_count
            b = min(float(np.mean(dist[i, labels == c])) for c in clusters if c != labels[i])
            denom = max(a, b)
            if denom > 0:
                scores[i] = (b - a) / denom

        return float(np.mean(scores))


__all__ = ["Kmeans1D"]
