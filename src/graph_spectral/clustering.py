"""
Cluster assignment over the Fiedler vector.

assign_clusters() is pure: it turns the Fiedler vector into one cluster
id per node row. write_clusters() is the only step that mutates nodes.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .graph import NodeIndex
from .kmeans import Kmeans1D
from .options import AUTOMATIC_CLUSTERS
from .validation import InvalidGraphError


def assign_clusters(
    fiedler: Union[Sequence[float], np.ndarray],
    requested_nb_clusters: int = AUTOMATIC_CLUSTERS,
    max_clusters: int = 8,
) -> np.ndarray:
    """
    Cluster the Fiedler vector values in one dimension.

    Args:
        fiedler: Fiedler vector, one value per node row
        requested_nb_clusters: Fixed cluster count, or -1 to choose the
            count automatically
        max_clusters: Upper bound for the automatic choice

    Returns:
        Integer cluster ids, one per value

    Raises:
        InvalidClusterRequestError: If the request cannot be satisfied
    """
    kmeans = Kmeans1D(fiedler)
    if requested_nb_clusters == AUTOMATIC_CLUSTERS:
        return kmeans.find_best_clustering(max_clusters)
    # Centroids are not needed; only per-value labels are kept
    labels, _ = kmeans.try_to_cluster(requested_nb_clusters)
    return labels


def write_clusters(index: NodeIndex, assignments: Union[Sequence[int], np.ndarray]) -> None:
    """
    Write cluster ids back onto the nodes: node(i) receives assignments[i].

    Raises:
        InvalidGraphError: If assignments and index differ in length (no
            node is modified)
    """
    if len(assignments) != len(index):
        raise InvalidGraphError(
            f"Got {len(assignments)} cluster ids for {len(index)} nodes"
        )
    for row, cluster in enumerate(assignments):
        index.node(row).set_cluster(int(cluster))


__all__ = ["assign_clusters", "write_clusters"]
