# rocviz/config.py
import os
from typing import Optional

from rocviz.metrics.roc import DEFAULT_N_POINTS

MAX_N_POINTS = 100_000


def default_n_points() -> int:
    raw = os.environ.get("ROCVIZ_N_POINTS")
    if not raw:
        return DEFAULT_N_POINTS
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"ROCVIZ_N_POINTS must be an integer, got {raw!r}")


def run_log_path() -> Optional[str]:
    # unset -> run logging disabled
    return os.environ.get("ROCVIZ_RUN_LOG") or None


def base_url() -> str:
    return os.environ.get("ROCVIZ_BASE_URL", "http://127.0.0.1:8000")


def max_n_points() -> int:
    # upper bound on the grid size an HTTP request may ask for
    raw = os.environ.get("ROCVIZ_MAX_N_POINTS")
    if not raw:
        return MAX_N_POINTS
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"ROCVIZ_MAX_N_POINTS must be an integer, got {raw!r}")
