"""
Graph Model — directed multigraph over contiguous integer node ids.

Nodes keep ordered out/in adjacency lists; the edge list keeps every
edge in insertion order. Parallel edges are allowed, self-loops are not.

Memory: O(V + E)
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple


@dataclass
class Node:
    node_id: int
    label: str = ""
    edges_out: List[int] = field(default_factory=list)
    edges_in: List[int] = field(default_factory=list)

    @property
    def out_degree(self) -> int:
        return len(self.edges_out)

    @property
    def in_degree(self) -> int:
        return len(self.edges_in)


@dataclass(frozen=True)
class Edge:
    source: int
    target: int


class Graph:
    """Directed graph whose node ids form the range [0, N)."""

    def __init__(self, nodes: List[Node] | None = None, edges: List[Edge] | None = None):
        self.nodes: List[Node] = nodes or []
        self.edges: List[Edge] = edges or []

    @classmethod
    def empty(cls, node_count: int) -> "Graph":
        """Create ``node_count`` unconnected nodes labelled by their id."""
        if node_count < 0:
            raise ValueError(f"node_count must be >= 0, got {node_count}.")
        return cls(nodes=[Node(node_id=i, label=str(i)) for i in range(node_count)])

    @classmethod
    def from_edges(cls, node_count: int, pairs: Iterable[Tuple[int, int]]) -> "Graph":
        graph = cls.empty(node_count)
        for source, target in pairs:
            graph.connect(source, target)
        return graph

    def connect(self, source: int, target: int) -> Edge:
        """Add the directed edge ``source -> target`` and return it."""
        n = len(self.nodes)
        if not (0 <= source < n):
            raise ValueError(f"Source node '{source}' does not exist.")
        if not (0 <= target < n):
            raise ValueError(f"Target node '{target}' does not exist.")
        if source == target:
            raise ValueError(f"Self-loop on node '{source}' is not allowed.")

        edge = Edge(source=source, target=target)
        self.nodes[source].edges_out.append(target)
        self.nodes[target].edges_in.append(source)
        self.edges.append(edge)
        return edge

    def number_of_nodes(self) -> int:
        return len(self.nodes)

    def number_of_edges(self) -> int:
        return len(self.edges)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"
