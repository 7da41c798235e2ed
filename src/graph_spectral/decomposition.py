"""
Eigendecomposition of graph Laplacians.

Wraps numpy's symmetric eigensolver (LAPACK syevd) and exposes the
eigenpairs in ascending eigenvalue order. Column 0 of the eigenvector
matrix belongs to the (near-)zero eigenvalue of the Laplacian; column 1
is the Fiedler vector.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np

from .validation import (
    DecompositionError,
    validate_graph_size,
    validate_symmetric_matrix,
)

ZERO_EIGENVALUE_TOLERANCE = 1e-9


class GraphStructureWarning(UserWarning):
    """Warning for graph structures with an ambiguous spectral partition."""

    pass


@dataclass(frozen=True)
class EigenDecomposition:
    """
    Eigenpairs of a symmetric matrix.

    Attributes:
        eigenvalues: Shape (n,), non-decreasing
        eigenvectors: Shape (n, n), orthonormal columns; column k belongs
            to eigenvalues[k]
    """

    eigenvalues: np.ndarray
    eigenvectors: np.ndarray

    @property
    def size(self) -> int:
        return int(self.eigenvalues.shape[0])

    @property
    def zero_eigenvalues(self) -> int:
        """Number of (near-)zero eigenvalues, i.e. connected components of a Laplacian."""
        return int(np.sum(np.abs(self.eigenvalues) < ZERO_EIGENVALUE_TOLERANCE))

    @property
    def fiedler_value(self) -> float:
        """
        Second-smallest eigenvalue (algebraic connectivity).

        Raises:
            InvalidGraphSizeError: If there are fewer than 2 eigenvalues
        """
        validate_graph_size(self.size)
        return float(self.eigenvalues[1])


def decompose(matrix: np.ndarray) -> EigenDecomposition:
    """
    Eigendecompose a symmetric matrix.

    Args:
        matrix: Symmetric (n, n) matrix, typically a graph Laplacian

    Returns:
        EigenDecomposition with ascending eigenvalues

    Raises:
        DecompositionError: If the matrix is not square, finite and
            symmetric, or the solver does not converge
    """
    L = validate_symmetric_matrix(np.asarray(matrix, dtype=float))

    try:
        eigenvalues, eigenvectors = np.linalg.eigh(L)
    except np.linalg.LinAlgError as exc:
        raise DecompositionError(f"Eigendecomposition failed: {exc}") from exc

    # Sort by eigenvalue
    idx = np.argsort(eigenvalues, kind="stable")
    eigenvalues = eigenvalues[idx]
    eigenvectors = eigenvectors[:, idx]

    return EigenDecomposition(eigenvalues=eigenvalues, eigenvectors=eigenvectors)


def extract_fiedler(decomposition: EigenDecomposition, stacklevel: int = 2) -> np.ndarray:
    """
    Get the Fiedler vector (eigenvector of the second-smallest eigenvalue).

    Warns with GraphStructureWarning when the Laplacian has several zero
    eigenvalues: the graph is disconnected and the Fiedler vector is any
    vector of the null space.

    Args:
        decomposition: Sorted eigendecomposition of a Laplacian
        stacklevel: Passed to warnings.warn so the warning points at the
            public caller

    Raises:
        InvalidGraphSizeError: If the decomposition has fewer than 2 eigenpairs
    """
    validate_graph_size(decomposition.size)

    components = decomposition.zero_eigenvalues
    if components > 1:
        warnings.warn(
            f"Laplacian has {components} zero eigenvalues (disconnected graph). "
            "The Fiedler vector is not unique; clusters may mix components.",
            GraphStructureWarning,
            stacklevel=stacklevel,
        )

    return np.array(decomposition.eigenvectors[:, 1])


__all__ = [
    "ZERO_EIGENVALUE_TOLERANCE",
    "GraphStructureWarning",
    "EigenDecomposition",
    "decompose",
    "extract_fiedler",
]
