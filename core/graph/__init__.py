from core.graph.generator import can_extend, generate_graph
from core.graph.model import Edge, Graph, Node

__all__ = ["can_extend", "generate_graph", "Edge", "Graph", "Node"]
