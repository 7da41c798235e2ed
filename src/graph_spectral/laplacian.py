"""
Laplacian matrix construction.

Two strategies build a dense symmetric n x n matrix from the adjacency of
a NodeIndex:

- strict: L = D - A with unit edge weights
- distance: edge weight w = 1 / log10(d) where d is the euclidean distance
  between the connected nodes' points; L[i, j] = -w, L[i, i] = sum of w

The distance weight is only defined for d > 1; see distance_weight().
"""

from __future__ import annotations

import math
from typing import Union, cast

import numpy as np

from .graph import NodeIndex
from .options import LaplacianKind
from .validation import DegenerateLaplacianError, InvalidOptionError, validate_distance


def strict_laplacian(index: NodeIndex) -> np.ndarray:
    """
    Compute the combinatorial Laplacian.

    Off-diagonal entries are -1 for connected pairs, diagonal entries are
    node degrees, so every row sums to zero. Isolated nodes give an all-zero
    row and column.

    Degrees are counted on the symmetrised adjacency of the index, not
    taken from get_connected_nodes(): self-loops and neighbours outside
    the graph are ignored.
    """
    A = index.adjacency().astype(float)
    D = np.diag(np.sum(A, axis=1))
    return cast(np.ndarray, D - A)


def distance_weight(distance: float) -> float:
    """
    Weight of an edge of the given length in the distance Laplacian.

    Raises:
        DegenerateLaplacianError: If distance <= 1 (infinite or negative weight)
    """
    return 1.0 / math.log10(validate_distance(distance))


def distance_laplacian(index: NodeIndex) -> np.ndarray:
    """
    Compute the distance-weighted Laplacian.

    Each connected pair is weighted once and mirrored.

    Raises:
        DegenerateLaplacianError: If two connected nodes are at distance <= 1
    """
    n = len(index)
    A = index.adjacency()
    W = np.zeros((n, n))

    for i, j in zip(*np.nonzero(np.triu(A, k=1))):
        node_i = index.node(int(i))
        node_j = index.node(int(j))
        distance = node_i.get_point().euclidean_distance_to(node_j.get_point())
        try:
            w = distance_weight(distance)
        except DegenerateLaplacianError as exc:
            raise DegenerateLaplacianError(
                f"Edge {node_i.get_id()!r} -- {node_j.get_id()!r}: {exc}"
            ) from exc
        W[i, j] = w
        W[j, i] = w

    D = np.diag(np.sum(W, axis=1))
    return cast(np.ndarray, D - W)


def build_laplacian(index: NodeIndex, kind: Union[LaplacianKind, str]) -> np.ndarray:
    """
    Build the Laplacian for the requested strategy.

    Args:
        index: Node ordering of the current call
        kind: LaplacianKind or its string value

    Returns:
        Symmetric (n, n) float matrix

    Raises:
        InvalidOptionError: If kind is not a known strategy
        DegenerateLaplacianError: For degenerate distance weights
    """
    kind = LaplacianKind.parse(kind)
    if kind is LaplacianKind.CONNECTED:
        return strict_laplacian(index)
    if kind is LaplacianKind.DISTANCE:
        return distance_laplacian(index)
    raise InvalidOptionError(f"Unsupported Laplacian strategy {kind!r}")


__all__ = [
    "strict_laplacian",
    "distance_weight",
    "distance_laplacian",
    "build_laplacian",
]
