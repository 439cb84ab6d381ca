"""
Runtime configuration.

All values can be overridden through environment variables.
"""

import os


def _optional_int(name: str, default: str | None) -> int | None:
    raw = os.getenv(name, default)
    if raw is None or raw.strip().lower() in ("", "none", "inf", "infinity"):
        return None
    return int(raw)


APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Graph generation defaults (16 nodes, out-degree > 1, no target cap)
DEFAULT_NODE_COUNT = int(os.getenv("DEFAULT_NODE_COUNT", "16"))
DEFAULT_MIN_OUT_DEGREE = int(os.getenv("DEFAULT_MIN_OUT_DEGREE", "1"))
DEFAULT_MAX_OUT_DEGREE = _optional_int("DEFAULT_MAX_OUT_DEGREE", None)

# Upper bound on node_count accepted by the API (centrality is O(N·(N+E)))
MAX_NODE_COUNT = int(os.getenv("MAX_NODE_COUNT", "500"))

# Upper bound on min_out_degree accepted by the API; edges ~ N·(min_out_degree + 1)
MAX_OUT_DEGREE = int(os.getenv("MAX_OUT_DEGREE", "50"))

# Consecutive source == target draws tolerated before generation stops
GENERATOR_MAX_SELF_PAIR_RETRIES = int(os.getenv("GENERATOR_MAX_SELF_PAIR_RETRIES", "1000"))

# Nodes at or above this percentile are reported as top nodes
CENTRALITY_PERCENTILE = float(os.getenv("CENTRALITY_PERCENTILE", "95"))
