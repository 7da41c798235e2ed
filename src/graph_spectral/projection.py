"""
Spectral embedding.

Projects every node onto the leading non-trivial eigenvectors of the
Laplacian. Column 0 (the constant eigenvector) is always skipped.
"""

from __future__ import annotations

from typing import Hashable

from .decomposition import EigenDecomposition
from .graph import NodeIndex
from .validation import InvalidGraphError, validate_dimensions, validate_graph_size


def project(
    decomposition: EigenDecomposition,
    index: NodeIndex,
    dimensions: int,
) -> dict[Hashable, list[float]]:
    """
    Map each node id to eigenvector columns 1..dimensions of its row.

    Args:
        decomposition: Eigendecomposition of the Laplacian built from index
        index: Node ordering of the current call
        dimensions: Number of coordinates per node

    Returns:
        Dict node id -> list of `dimensions` floats

    Raises:
        InvalidGraphSizeError: If the graph has fewer than 2 nodes
        InvalidProjectionDimensionsError: If dimensions is not an integer in [1, n - 1]
        InvalidGraphError: If index and decomposition sizes differ
    """
    n = validate_graph_size(len(index))
    if decomposition.size != n:
        raise InvalidGraphError(
            f"Decomposition of size {decomposition.size} does not match {n} nodes"
        )
    dimensions = validate_dimensions(dimensions, n)

    coords = decomposition.eigenvectors[:, 1 : dimensions + 1]
    return {
        node.get_id(): [float(v) for v in coords[row]] for row, node in enumerate(index)
    }


__all__ = ["project"]
