"""
Input validation utilities for spectral clustering.

Provides the exception hierarchy and centralized validation functions for
graph size, Laplacian weights, cluster requests and projection dimensions.
Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np


class SpectralClusteringError(Exception):
    """Base exception for all spectral clustering failures."""

    pass


class ValidationError(SpectralClusteringError, ValueError):
    """Base exception for invalid input."""

    pass


class InvalidGraphError(ValidationError):
    """Raised when a graph is malformed (duplicate ids, misaligned data)."""

    pass


class InvalidGraphSizeError(InvalidGraphError):
    """Raised when a graph has too few nodes for a Fiedler vector."""

    pass


class DegenerateLaplacianError(ValidationError):
    """Raised when an edge weight of the distance Laplacian is undefined or negative."""

    pass


class InvalidClusterRequestError(ValidationError):
    """Raised when a requested cluster count cannot be satisfied."""

    pass


class InvalidProjectionDimensionsError(ValidationError):
    """Raised when projection dimensions are out of range."""

    pass


class InvalidOptionError(ValidationError):
    """Raised when a clustering option has an unsupported value."""

    pass


class DecompositionError(SpectralClusteringError, ArithmeticError):
    """Raised when the eigendecomposition cannot be computed."""

    pass


def validate_graph_size(node_count: int, minimum: int = 2) -> int:
    """
    Validate that a graph has enough nodes for spectral analysis.

    Args:
        node_count: Number of nodes in the graph
        minimum: Smallest acceptable node count

    Returns:
        Validated node count

    Raises:
        InvalidGraphSizeError: If node_count < minimum
    """
    if node_count < minimum:
        raise InvalidGraphSizeError(
            f"Graph must have at least {minimum} nodes, got {node_count}"
        )
    return node_count


def validate_distance(distance: float) -> float:
    """
    Validate a distance used as a distance-Laplacian weight.

    The weight 1 / log10(d) is infinite at d == 1 and negative below it.

    Raises:
        DegenerateLaplacianError: If the distance is not finite or d <= 1
    """
    if not math.isfinite(distance):
        raise DegenerateLaplacianError(f"Distance must be finite, got {distance}")
    if distance == 1.0:
        raise DegenerateLaplacianError(
            "Distance of exactly 1 between connected nodes gives an infinite weight"
        )
    if distance < 1.0:
        raise DegenerateLaplacianError(
            f"Distance {distance} < 1 between connected nodes gives a negative weight"
        )
    return distance


def validate_symmetric_matrix(matrix: np.ndarray) -> np.ndarray:
    """
    Validate that a matrix is square, finite and symmetric.

    Raises:
        DecompositionError: If any condition fails
    """
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DecompositionError(f"Matrix must be square, got shape {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise DecompositionError("Matrix contains NaN or infinite entries")
    if not np.allclose(matrix, matrix.T):
        raise DecompositionError("Matrix is not symmetric")
    return matrix


def validate_cluster_count(k: int, distinct_values: int) -> int:
    """
    Validate a fixed cluster count against the data it partitions.

    Args:
        k: Requested number of clusters
        distinct_values: Number of distinct values to cluster

    Returns:
        Validated cluster count

    Raises:
        InvalidClusterRequestError: If k <= 0, no data, or k > distinct_values
    """
    if distinct_values == 0:
        raise InvalidClusterRequestError("Cannot cluster an empty sequence")
    if k <= 0:
        raise InvalidClusterRequestError(f"Cluster count must be >= 1, got {k}")
    if k > distinct_values:
        raise InvalidClusterRequestError(
            f"Cannot form {k} clusters from {distinct_values} distinct values"
        )
    return k


def validate_max_clusters(max_clusters: int) -> int:
    """
    Validate the upper bound of automatic cluster-count selection.

    Raises:
        InvalidClusterRequestError: If max_clusters < 1
    """
    if max_clusters < 1:
        raise InvalidClusterRequestError(f"max_clusters must be >= 1, got {max_clusters}")
    return max_clusters


def validate_dimensions(dimensions: Any, node_count: int) -> int:
    """
    Validate projection dimensions.

    Column 0 (the trivial eigenvector) is never used, so at most
    node_count - 1 dimensions are available. Integral floats such as 2.0
    are accepted; fractional values and booleans are not.

    Raises:
        InvalidProjectionDimensionsError: If dimensions is not an integer
            or not in [1, node_count - 1]
    """
    if isinstance(dimensions, bool):
        raise InvalidProjectionDimensionsError(
            f"dimensions must be an integer, got {dimensions!r}"
        )
    if isinstance(dimensions, numbers.Integral):
        dimensions = int(dimensions)
    elif isinstance(dimensions, numbers.Real) and float(dimensions).is_integer():
        dimensions = int(dimensions)
    else:
        raise InvalidProjectionDimensionsError(
            f"dimensions must be an integer, got {dimensions!r}"
        )

    if dimensions < 1:
        raise InvalidProjectionDimensionsError(f"dimensions must be >= 1, got {dimensions}")
    if dimensions > node_count - 1:
        raise InvalidProjectionDimensionsError(
            f"dimensions must be <= {node_count - 1} for a graph of {node_count} nodes, "
            f"got {dimensions}"
        )
    return dimensions


__all__ = [
    "SpectralClusteringError",
    "ValidationError",
    "InvalidGraphError",
    "InvalidGraphSizeError",
    "DegenerateLaplacianError",
    "InvalidClusterRequestError",
    "InvalidProjectionDimensionsError",
    "InvalidOptionError",
    "DecompositionError",
    "validate_graph_size",
    "validate_distance",
    "validate_symmetric_matrix",
    "validate_cluster_count",
    "validate_max_clusters",
    "validate_dimensions",
]
