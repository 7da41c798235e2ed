"""
Graph container and node index.

Graph is a small ordered collection of nodes with undirected links, built
from Node objects, dicts or arbitrary objects the same way layouts accept
their input. NodeIndex freezes a node ordering for one pipeline call so
that matrix rows, eigenvector rows and cluster write-back share it.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterator, Optional, Sequence

import numpy as np

from .types import GraphProtocol, Link, LinkLike, Node, NodeLike, NodeProtocol
from .validation import InvalidGraphError


class Graph:
    """
    Ordered graph of nodes connected by undirected links.

    Link endpoints may be Node objects, integer positions in the node
    list, or node ids. Integers are always treated as positions.

    Example:
        graph = Graph(
            nodes=[
                {"id": "a", "point": (0, 0)},
                {"id": "b", "point": (3, 0)},
                {"id": "c", "point": (3, 4)},
            ],
            links=[("a", "b"), {"source": "b", "target": "c"}],
        )
        graph.get_nodes()[1].is_connected_to(graph.node("c"))  # True
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        links: Optional[Sequence[LinkLike]] = None,
    ) -> None:
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._by_id: dict[Hashable, Node] = {}

        if nodes is not None:
            self.nodes = nodes
        if links is not None:
            self.links = links

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """Get the list of nodes."""
        return self._nodes

    @nodes.setter
    def nodes(self, value: Sequence[NodeLike]) -> None:
        """Set nodes from a sequence of Node objects, dicts, or objects.

        Replaces all nodes and drops existing links.
        """
        for link in self._links:
            self._resolve(link.source).disconnect(self._resolve(link.target))
        self._nodes = []
        self._links = []
        self._by_id = {}
        for node_data in value:
            if isinstance(node_data, Node):
                node = node_data
            elif isinstance(node_data, dict):
                node = Node(**node_data)
            else:
                node = Node(
                    id=getattr(node_data, "id", None),
                    point=getattr(node_data, "point", None),
                )
            self.add_node(node)

    @property
    def links(self) -> list[Link]:
        """Get the list of links."""
        return self._links

    @links.setter
    def links(self, value: Sequence[LinkLike]) -> None:
        """Set links from a sequence of Link objects, dicts, tuples, or objects."""
        for link in self._links:
            self._resolve(link.source).disconnect(self._resolve(link.target))
        self._links = []
        for link_data in value:
            if isinstance(link_data, Link):
                link = link_data
            elif isinstance(link_data, dict):
                link = Link(**link_data)
            elif isinstance(link_data, tuple):
                link = Link(link_data[0], link_data[1])
            else:
                link = Link(getattr(link_data, "source", None), getattr(link_data, "target", None))
            self.add_link(link.source, link.target)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> Node:
        """
        Append a node, assigning its index and a default id.

        Nodes without an id get their position as id.

        Raises:
            InvalidGraphError: If a node with the same id already exists
        """
        if node.id is None:
            node.id = len(self._nodes)
        if node.id in self._by_id:
            raise InvalidGraphError(f"Duplicate node id {node.id!r}")
        node.index = len(self._nodes)
        self._nodes.append(node)
        self._by_id[node.id] = node
        return node

    def add_link(self, source: Any, target: Any) -> Link:
        """
        Connect two nodes.

        Raises:
            InvalidGraphError: If an endpoint does not belong to this graph
        """
        src = self._resolve(source)
        tgt = self._resolve(target)
        src.connect(tgt)
        link = Link(src, tgt)
        self._links.append(link)
        return link

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_nodes(self) -> list[Node]:
        """Get the nodes in their stable order."""
        return self._nodes

    def node(self, node_id: Hashable) -> Node:
        """
        Look up a node by id.

        Raises:
            InvalidGraphError: If no node has this id
        """
        try:
            return self._by_id[node_id]
        except KeyError:
            raise InvalidGraphError(f"Unknown node id {node_id!r}") from None

    def clusters(self) -> dict[Hashable, Optional[int]]:
        """Get the current cluster label of every node, keyed by id."""
        return {node.id: node.cluster for node in self._nodes}

    def _resolve(self, endpoint: Any) -> Node:
        if isinstance(endpoint, Node):
            if self._by_id.get(endpoint.id) is not endpoint:
                raise InvalidGraphError(f"Node {endpoint.id!r} is not part of this graph")
            return endpoint
        if isinstance(endpoint, int) and not isinstance(endpoint, bool):
            if not 0 <= endpoint < len(self._nodes):
                raise InvalidGraphError(
                    f"Link endpoint index {endpoint} out of bounds [0, {len(self._nodes)})"
                )
            return self._nodes[endpoint]
        return self.node(endpoint)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, links={len(self._links)})"


class NodeIndex:
    """
    Frozen node ordering shared by every stage of one pipeline call.

    Row i of every matrix and vector produced for the call corresponds to
    node(i). Built from any object exposing get_nodes().

    Raises:
        InvalidGraphError: If two nodes share an id
    """

    def __init__(self, nodes: Sequence[NodeProtocol]) -> None:
        self._nodes: tuple[NodeProtocol, ...] = tuple(nodes)
        self._rows: dict[Hashable, int] = {}
        for row, node in enumerate(self._nodes):
            node_id = node.get_id()
            if node_id in self._rows:
                raise InvalidGraphError(f"Duplicate node id {node_id!r}")
            self._rows[node_id] = row
        self._adjacency: Optional[np.ndarray] = None

    @classmethod
    def from_graph(cls, graph: GraphProtocol) -> NodeIndex:
        return cls(graph.get_nodes())

    def node(self, row: int) -> NodeProtocol:
        return self._nodes[row]

    def row_of(self, node_id: Hashable) -> int:
        return self._rows[node_id]

    @property
    def ids(self) -> list[Hashable]:
        return [node.get_id() for node in self._nodes]

    def adjacency(self) -> np.ndarray:
        """
        Symmetric boolean adjacency matrix.

        A pair is connected if either node reports the other as connected,
        which keeps both Laplacian variants symmetric. The diagonal is False.
        """
        if self._adjacency is None:
            n = len(self._nodes)
            adj = np.zeros((n, n), dtype=bool)
            for i in range(n):
                node_i = self._nodes[i]
                for j in range(i + 1, n):
                    node_j = self._nodes[j]
                    if node_i.is_connected_to(node_j) or node_j.is_connected_to(node_i):
                        adj[i, j] = True
                        adj[j, i] = True
            self._adjacency = adj
        return self._adjacency

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeProtocol]:
        return iter(self._nodes)


__all__ = ["Graph", "NodeIndex"]
