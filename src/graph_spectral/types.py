"""
Common types for spectral clustering.

This module provides the fundamental types consumed by the pipeline:
- Point: Spatial position of a node, used by the distance Laplacian
- Node: Graph vertex with identifier, position, adjacency and cluster label
- Link: Undirected edge between two nodes
- Protocols describing the narrow interfaces the pipeline relies on, so
  any graph implementation exposing them can be clustered
"""

from __future__ import annotations

import math
from typing import Any, Hashable, Iterable, Optional, Protocol, Sequence, Union


class PointProtocol(Protocol):
    """Anything that can measure a euclidean distance to another point."""

    def euclidean_distance_to(self, other: Any) -> float: ...


class NodeProtocol(Protocol):
    """Node interface required by the pipeline."""

    def get_id(self) -> Hashable: ...

    def get_connected_nodes(self) -> Iterable[Any]: ...

    def is_connected_to(self, other: Any) -> bool: ...

    def get_point(self) -> PointProtocol: ...

    def set_cluster(self, cluster: int) -> None: ...


class GraphProtocol(Protocol):
    """Graph interface required by the pipeline."""

    def get_nodes(self) -> Sequence[NodeProtocol]: ...


class Point:
    """
    Position in euclidean space.

    Attributes:
        coords: Coordinates as a tuple of floats (any dimension)
    """

    __slots__ = ("coords",)

    def __init__(self, *coords: float) -> None:
        if len(coords) == 1 and isinstance(coords[0], (tuple, list)):
            coords = tuple(coords[0])
        self.coords: tuple[float, ...] = tuple(float(c) for c in coords)

    @property
    def x(self) -> float:
        return self.coords[0] if self.coords else 0.0

    @property
    def y(self) -> float:
        return self.coords[1] if len(self.coords) > 1 else 0.0

    def euclidean_distance_to(self, other: Point) -> float:
        """
        Euclidean distance to another point.

        Raises:
            ValueError: If the points have different dimensions
        """
        if len(self.coords) != len(other.coords):
            raise ValueError(
                f"Cannot measure distance between {len(self.coords)}-d "
                f"and {len(other.coords)}-d points"
            )
        return math.dist(self.coords, other.coords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.coords == other.coords

    def __hash__(self) -> int:
        return hash(self.coords)

    def __repr__(self) -> str:
        return f"Point{self.coords}"


PointLike = Union[Point, Sequence[float]]
"""Input type for points: Point objects or coordinate sequences."""


def to_point(value: Optional[PointLike]) -> Point:
    """Convert a coordinate sequence (or None, the origin) to a Point."""
    if value is None:
        return Point(0.0, 0.0)
    if isinstance(value, Point):
        return value
    return Point(*value)


class Node:
    """
    Graph node with identifier, position and cluster label.

    Adjacency is undirected: Graph.add_link registers each endpoint with
    the other. Self-connections are ignored.

    Attributes:
        id: Node identifier (unique within a graph)
        point: Spatial position used by the distance Laplacian
        cluster: Cluster id written by SpectralClustering.compute
        index: Position in the owning graph (set by Graph)
    """

    def __init__(
        self,
        id: Hashable = None,
        point: Optional[PointLike] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize node with optional properties."""
        self.id: Hashable = id
        self.point: Point = to_point(point)
        self.cluster: Optional[int] = kwargs.get("cluster")
        self.index: Optional[int] = kwargs.get("index")
        self._neighbors: set[Node] = set()

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def get_id(self) -> Hashable:
        return self.id

    def get_point(self) -> Point:
        return self.point

    def get_connected_nodes(self) -> set[Node]:
        """Get a copy of the set of adjacent nodes."""
        return set(self._neighbors)

    def is_connected_to(self, other: Node) -> bool:
        return other in self._neighbors

    def connect(self, other: Node) -> None:
        """Connect this node and other in both directions."""
        if other is self:
            return
        self._neighbors.add(other)
        other._neighbors.add(self)

    def disconnect(self, other: Node) -> None:
        """Remove the connection between this node and other, if any."""
        self._neighbors.discard(other)
        other._neighbors.discard(self)

    def set_cluster(self, cluster: int) -> None:
        self.cluster = cluster

    @property
    def degree(self) -> int:
        return len(self._neighbors)

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, point={self.point!r}, cluster={self.cluster})"


class Link:
    """
    Undirected edge connecting two nodes.

    Attributes:
        source: Source node, node index or node id
        target: Target node, node index or node id
    """

    def __init__(self, source: Any, target: Any, **kwargs: Any) -> None:
        """
        Initialize link between two nodes.

        Raises:
            ValueError: If source or target is None
        """
        if source is None:
            raise ValueError("Link source cannot be None")
        if target is None:
            raise ValueError("Link target cannot be None")

        self.source = source
        self.target = target

        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def __repr__(self) -> str:
        src = self.source.id if isinstance(self.source, Node) else self.source
        tgt = self.target.id if isinstance(self.target, Node) else self.target
        return f"Link({src!r} -- {tgt!r})"


NodeLike = Union[Node, dict[str, Any], Any]
"""Input type for nodes: Node objects, dicts, or objects with id/point attributes."""

LinkLike = Union[Link, dict[str, Any], tuple[Any, Any], Any]
"""Input type for links: Link objects, dicts, (source, target) tuples, or objects."""


__all__ = [
    "PointProtocol",
    "NodeProtocol",
    "GraphProtocol",
    "Point",
    "PointLike",
    "to_point",
    "Node",
    "Link",
    "NodeLike",
    "LinkLike",
]
