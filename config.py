"""
config.py — Engine & Host Settings
===================================
Every tunable constant lives here.  Values that a deployment may want to
change can be overridden from the environment; everything else is a
plain module constant.

    from config import MAX_NODES, TICK_INTERVAL_MS
"""

import os
from typing import Tuple


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ---------------------------------------------------------------------------
# Graph Store limits
# ---------------------------------------------------------------------------
MIN_NODES = 1
MAX_NODES = 20

# Reject malformed edges instead of dropping them
STRICT_EDGES = _env_bool("TRAVERSAL_STRICT_EDGES", False)

# ---------------------------------------------------------------------------
# Cadence (milliseconds between auto-mode ticks)
# ---------------------------------------------------------------------------
# Advertised to hosts; the engine itself never sleeps.
TICK_INTERVAL_MS = int(os.environ.get("TRAVERSAL_TICK_MS", "50"))

# ---------------------------------------------------------------------------
# Random graph generator defaults
# ---------------------------------------------------------------------------
DEFAULT_EDGE_PROBABILITY = 0.3
DEFAULT_WEIGHT_RANGE: Tuple[int, int] = (1, 10)

# ---------------------------------------------------------------------------
# Host application
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("TRAVERSAL_LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("TRAVERSAL_HOST", "127.0.0.1")
PORT = int(os.environ.get("TRAVERSAL_PORT", "5000"))
DEBUG = _env_bool("TRAVERSAL_DEBUG", False)
