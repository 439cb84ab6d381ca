"""
Request parameter validation for graph generation.

Time Complexity: O(1)
Memory: O(1)
"""

from app.config import MAX_NODE_COUNT, MAX_OUT_DEGREE


def validate_generation_params(
    node_count: int,
    min_out_degree: int,
    max_out_degree: int | None,
) -> str | None:
    """
    Validate generator parameters. Returns error message if invalid, None if valid.

    Checks:
        1. node_count within [0, MAX_NODE_COUNT]
        2. min_out_degree within [0, MAX_OUT_DEGREE]
        3. max_out_degree, when given, is non-negative
    """
    if node_count < 0:
        return "node_count must be non-negative."

    if node_count > MAX_NODE_COUNT:
        return f"node_count must not exceed {MAX_NODE_COUNT}."

    if min_out_degree < 0:
        return "min_out_degree must be non-negative."

    if min_out_degree > MAX_OUT_DEGREE:
        return f"min_out_degree must not exceed {MAX_OUT_DEGREE}."

    if max_out_degree is not None and max_out_degree < 0:
        return "max_out_degree must be non-negative."

    return None
