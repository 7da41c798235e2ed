"""
graph-spectral: Spectral clustering of graph nodes via the Fiedler vector.

This package partitions graph nodes by building a Laplacian matrix,
eigendecomposing it, and clustering the values of the second-smallest
eigenvector in one dimension. It also exposes a spectral embedding of
each node.

Modules:
- laplacian: Strict and distance-weighted Laplacian construction
- decomposition: Symmetric eigendecomposition and Fiedler vector
- kmeans: One-dimensional k-means with automatic cluster count
- clustering: Cluster assignment and write-back onto nodes
- projection: Spectral embedding
- pipeline: SpectralClustering orchestrator
"""

__version__ = "0.1.0"

# Cluster assignment
from .clustering import assign_clusters, write_clusters

# Eigendecomposition
from .decomposition import (
    EigenDecomposition,
    GraphStructureWarning,
    decompose,
    extract_fiedler,
)

# Graph container
from .graph import Graph, NodeIndex

# One-dimensional k-means
from .kmeans import Kmeans1D

# Laplacian construction
from .laplacian import (
    build_laplacian,
    distance_laplacian,
    distance_weight,
    strict_laplacian,
)

# Options
from .options import (
    AUTOMATIC_CLUSTERS,
    ClusteringOptions,
    LaplacianKind,
    resolve_options,
)

# Orchestrator
from .pipeline import SpectralClustering

# Spectral embedding
from .projection import project
from .types import (
    GraphProtocol,
    Link,
    LinkLike,
    Node,
    NodeLike,
    NodeProtocol,
    Point,
    PointProtocol,
)

# Errors
from .validation import (
    DecompositionError,
    DegenerateLaplacianError,
    InvalidClusterRequestError,
    InvalidGraphError,
    InvalidGraphSizeError,
    InvalidOptionError,
    InvalidProjectionDimensionsError,
    SpectralClusteringError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Point",
    "Node",
    "Link",
    "NodeLike",
    "LinkLike",
    "PointProtocol",
    "NodeProtocol",
    "GraphProtocol",
    # Graph
    "Graph",
    "NodeIndex",
    # Options
    "AUTOMATIC_CLUSTERS",
    "LaplacianKind",
    "ClusteringOptions",
    "resolve_options",
    # Pipeline stages
    "strict_laplacian",
    "distance_laplacian",
    "distance_weight",
    "build_laplacian",
    "EigenDecomposition",
    "GraphStructureWarning",
    "decompose",
    "extract_fiedler",
    "Kmeans1D",
    "assign_clusters",
    "write_clusters",
    "project",
    # Orchestrator
    "SpectralClustering",
    # Errors
    "SpectralClusteringError",
    "ValidationError",
    "InvalidGraphError",
    "InvalidGraphSizeError",
    "DegenerateLaplacianError",
    "InvalidClusterRequestError",
    "InvalidProjectionDimensionsError",
    "InvalidOptionError",
    "DecompositionError",
]
