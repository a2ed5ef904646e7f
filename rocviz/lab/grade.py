# rocviz/lab/grade.py
from typing import Any, Dict, Sequence

from rocviz.metrics.roc import DEFAULT_N_POINTS, DEFAULT_POSITIVE_MARKER, estimate_auc
from rocviz.svl.roc_verify import auc_close, reference_auc


def grade(y_true: Sequence[Any], y_score: Sequence[float],
          n_points: int = DEFAULT_N_POINTS,
          positive_marker: Any = DEFAULT_POSITIVE_MARKER,
          tol: float = 0.02) -> Dict:
    # grid estimate vs. the exact all-thresholds area
    est = estimate_auc(y_true, y_score, n_points, positive_marker)
    ref = reference_auc(y_true, y_score, positive_marker)
    ok = auc_close(est, ref, tol)
    notes = []
    if not ok:
        notes.append(
            f"grid AUC {est:.4f} differs from exact AUC {ref:.4f} by more than {tol}; "
            f"scores may be clustered between grid thresholds (try a larger n_points)"
        )
    return {
        "pass": ok,
        "estimated_auc": est,
        "reference_auc": ref,
        "notes": notes,
    }
