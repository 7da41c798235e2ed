"""
Spectral clustering pipeline.

SpectralClustering ties the stages together for one graph:

1. Resolve options
2. Freeze the node order (NodeIndex)
3. Build the Laplacian
4. Eigendecompose it (ascending eigenvalues)
5. Either cluster the Fiedler vector and write the ids onto the nodes,
   or project each node onto the leading non-trivial eigenvectors
"""

from __future__ import annotations

from typing import Hashable, Optional

import numpy as np

from .clustering import assign_clusters, write_clusters
from .decomposition import EigenDecomposition, decompose, extract_fiedler
from .graph import NodeIndex
from .laplacian import build_laplacian
from .options import ClusteringOptions, OptionsLike, resolve_options
from .projection import project
from .types import GraphProtocol
from .validation import validate_graph_size


class SpectralClustering:
    """
    Spectral clustering of a graph's nodes via the Fiedler vector.

    The object only holds a reference to the graph; each call reads the
    graph as it is at call time and is independent of previous calls.

    Example:
        graph = Graph(
            nodes=[{"id": n} for n in "abcd"],
            links=[("a", "b"), ("c", "d"), ("b", "c")],
        )
        clustering = SpectralClustering(graph)
        clustering.compute({"requestedNbClusters": 2})
        graph.clusters()  # {'a': 0, 'b': 0, 'c': 1, 'd': 1} (ids may swap)

        clustering.get_projection(dimensions=2)  # {'a': [...], ...}
    """

    def __init__(self, graph: GraphProtocol) -> None:
        self._graph = graph

    @property
    def graph(self) -> GraphProtocol:
        """Get the clustered graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    def compute(self, options: OptionsLike = None) -> None:
        """
        Cluster the nodes and store each node's cluster id on it.

        Args:
            options: ClusteringOptions, a mapping of overrides
                (laplacianMatrix, requestedNbClusters, maxClusters), or None

        Raises:
            InvalidGraphSizeError: If the graph has fewer than 2 nodes
            DegenerateLaplacianError: For distance weights at distance <= 1
            DecompositionError: If the eigensolver fails
            InvalidClusterRequestError: If the cluster request cannot be met
            InvalidOptionError: If an option value is invalid

        No node is modified when an error is raised.
        """
        index, assignments = self._cluster(resolve_options(options))
        write_clusters(index, assignments)

    def get_projection(
        self, options: OptionsLike = None, dimensions: int = 2
    ) -> dict[Hashable, list[float]]:
        """
        Spectral embedding of every node.

        Args:
            options: As for compute(); only laplacianMatrix is used
            dimensions: Number of coordinates per node, 1 <= dimensions < n

        Returns:
            Dict node id -> eigenvector columns 1..dimensions of the node's row

        Raises:
            InvalidGraphSizeError: If the graph has fewer than 2 nodes
            InvalidProjectionDimensionsError: If dimensions is out of range
            DegenerateLaplacianError: For distance weights at distance <= 1
            DecompositionError: If the eigensolver fails
        """
        running = resolve_options(options)
        index = self._index()
        eigen = self._decompose(index, running)
        return project(eigen, index, dimensions)

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def cluster_assignments(self, options: OptionsLike = None) -> np.ndarray:
        """Cluster ids per node row, as compute() would write them, without writing."""
        _, assignments = self._cluster(resolve_options(options))
        return assignments

    def decomposition(self, options: OptionsLike = None) -> EigenDecomposition:
        """Eigendecomposition of the Laplacian selected by options."""
        running = resolve_options(options)
        return self._decompose(self._index(), running)

    def fiedler_vector(self, options: OptionsLike = None) -> dict[Hashable, float]:
        """Fiedler vector value of every node, keyed by node id."""
        running = resolve_options(options)
        index = self._index()
        fiedler = extract_fiedler(self._decompose(index, running), stacklevel=3)
        return {node.get_id(): float(fiedler[row]) for row, node in enumerate(index)}

    def algebraic_connectivity(self, options: OptionsLike = None) -> float:
        """Second-smallest Laplacian eigenvalue; 0 for disconnected graphs."""
        return self.decomposition(options).fiedler_value

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _index(self) -> NodeIndex:
        index = NodeIndex.from_graph(self._graph)
        validate_graph_size(len(index))
        return index

    def _decompose(self, index: NodeIndex, running: ClusteringOptions) -> EigenDecomposition:
        laplacian = build_laplacian(index, running.laplacian_matrix)
        return decompose(laplacian)

    def _cluster(self, running: ClusteringOptions) -> tuple[NodeIndex, np.ndarray]:
        index = self._index()
        eigen = self._decompose(index, running)
        fiedler = extract_fiedler(eigen, stacklevel=4)
        assignments = assign_clusters(
            fiedler,
            requested_nb_clusters=running.requested_nb_clusters,
            max_clusters=running.max_clusters,
        )
        return index, assignments


__all__ = ["SpectralClustering"]
