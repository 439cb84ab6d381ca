"""
Graph Generator — random directed graph under out-degree bounds.

Edges are drawn from a low-out-degree source to a target whose out-degree
is still within the cap, until every node has out-degree > min_out_degree
or no eligible source/target remains. Source == target draws are rejected
and retried; a run of too many rejections ends generation.

Time Complexity: O(N × E) — candidate sets are rebuilt per edge
Memory: O(V + E)
"""

import logging
import math
import random
from typing import List

from app.config import GENERATOR_MAX_SELF_PAIR_RETRIES
from core.graph.model import Graph

logger = logging.getLogger(__name__)


def _source_candidates(graph: Graph, min_out_degree: int) -> List[int]:
    return [node.node_id for node in graph.nodes if node.out_degree <= min_out_degree]


def _target_candidates(graph: Graph, max_out_degree: float | None) -> List[int]:
    if max_out_degree is None or math.isinf(max_out_degree):
        return [node.node_id for node in graph.nodes]
    return [node.node_id for node in graph.nodes if node.out_degree <= max_out_degree]


def can_extend(graph: Graph, min_out_degree: int, max_out_degree: float | None = None) -> bool:
    """
    Return True if the generator could still add an edge to ``graph``.

    That requires a source candidate and a target candidate that are not
    the same node.
    """
    sources = _source_candidates(graph, min_out_degree)
    targets = _target_candidates(graph, max_out_degree)
    if not sources or not targets:
        return False
    return any(s != t for s in sources for t in targets)


def generate_graph(
    node_count: int,
    min_out_degree: int,
    max_out_degree: float | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
    max_self_pair_retries: int = GENERATOR_MAX_SELF_PAIR_RETRIES,
) -> Graph:
    """
    Build a random directed graph over ``node_count`` nodes.

    Args:
        node_count: Number of nodes; ids are 0..node_count-1.
        min_out_degree: Nodes with out-degree <= this value keep being
            picked as edge sources.
        max_out_degree: Only nodes with out-degree <= this value are
            picked as targets. None (or math.inf) means no cap.
        seed: Seed for a private ``random.Random``; ignored if ``rng`` is given.
        rng: Random source to draw from.
        max_self_pair_retries: Consecutive source == target draws allowed
            before generation stops.

    Returns:
        The generated Graph. Exhaustion of candidates is normal termination,
        so the graph may be sparser than requested.
    """
    if rng is None:
        rng = random.Random(seed)

    graph = Graph.empty(node_count)
    rejections = 0

    while True:
        sources = _source_candidates(graph, min_out_degree)
        if not sources:
            break
        source = rng.choice(sources)

        targets = _target_candidates(graph, max_out_degree)
        if not targets:
            break
        target = rng.choice(targets)

        if source == target:
            rejections += 1
            if rejections > max_self_pair_retries:
                logger.warning(
                    "Stopping generation after %d consecutive self-pair draws (nodes=%d, edges=%d)",
                    rejections,
                    graph.number_of_nodes(),
                    graph.number_of_edges(),
                )
                break
            continue

        rejections = 0
        graph.connect(source, target)

    logger.debug(
        "Generated graph with %d nodes and %d edges (min_out=%s, max_out=%s)",
        graph.number_of_nodes(),
        graph.number_of_edges(),
        min_out_degree,
        max_out_degree,
    )
    return graph
