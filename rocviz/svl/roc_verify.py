# rocviz/svl/roc_verify.py
from typing import Any, Dict, Sequence

import numpy as np
from sklearn.metrics import roc_auc_score

from rocviz.metrics.roc import (
    DEFAULT_N_POINTS, DEFAULT_POSITIVE_MARKER, as_label_list, build_roc_curve, curve_area,
    is_missing_label,
)
from rocviz.metrics.errors import DegenerateInput, InvalidInput
from .roc_spec import RocSpec


def compute_roc(y_true: Sequence[Any], y_score: Sequence[float],
                n_points: int = DEFAULT_N_POINTS,
                positive_marker: Any = DEFAULT_POSITIVE_MARKER,
                title: str = "ROC Curve") -> Dict[str, Any]:
    curve = build_roc_curve(y_true, y_score, n_points, positive_marker)
    spec = RocSpec(
        title=title,
        fpr=curve.fpr,
        tpr=curve.tpr,
        thresholds=curve.thresholds,
        auc=curve_area(curve),
        n_points=n_points,
    )
    return spec.model_dump()


def reference_auc(y_true: Sequence[Any], y_score: Sequence[float],
                  positive_marker: Any = DEFAULT_POSITIVE_MARKER) -> float:
    """Exact (every-score-threshold) AUC from scikit-learn over the labelled samples."""
    labels = as_label_list(y_true)
    scores = np.asarray(y_score, dtype=np.float64).ravel()
    if len(labels) != scores.size:
        raise InvalidInput("true labels and scores differ in length")
    keep = np.array([not is_missing_label(v) for v in labels], dtype=bool)
    y = np.array([int(v == positive_marker) for v in labels if not is_missing_label(v)], dtype=int)
    if y.size == 0 or y.min() == y.max():
        raise DegenerateInput("reference AUC needs both classes present")
    return float(roc_auc_score(y, scores[keep]))


def auc_close(a: float, b: float, tol: float = 0.01) -> bool:
    try:
        a = float(a); b = float(b)
    except (TypeError, ValueError):
        return False
    if not (np.isfinite(a) and np.isfinite(b)):
        return False
    return abs(a - b) <= tol
