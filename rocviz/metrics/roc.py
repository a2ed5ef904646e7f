# rocviz/metrics/roc.py
"""
Empirical ROC curve over a fixed threshold grid, and its trapezoidal AUC.

The curve is swept over ``n_points`` thresholds spaced evenly on [0, 1]. A
sample counts as a positive prediction when its score is >= the threshold.
Points are kept in ascending-threshold order and thinned so that no two share
a false-positive rate (the lowest threshold for each rate wins).

Grid values come straight from ``numpy.linspace`` and carry its rounding:
with ``n_points=11`` the fourth threshold is 0.30000000000000004, so a score
of exactly 0.3 falls below it. Only 0 and 1 are guaranteed exact.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import DegenerateInput, InvalidInput

DEFAULT_N_POINTS = 100
DEFAULT_POSITIVE_MARKER = 1


@dataclass(frozen=True)
class ROCPoint:
    false_positive_rate: float
    true_positive_rate: float
    threshold: float


@dataclass(frozen=True)
class ROCCurve:
    points: Tuple[ROCPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[ROCPoint]:
        return iter(self.points)

    def __getitem__(self, i):
        return self.points[i]

    @property
    def fpr(self) -> List[float]:
        return [p.false_positive_rate for p in self.points]

    @property
    def tpr(self) -> List[float]:
        return [p.true_positive_rate for p in self.points]

    @property
    def thresholds(self) -> List[float]:
        return [p.threshold for p in self.points]


def as_label_list(xs) -> List[Any]:
    if isinstance(xs, np.ndarray):
        return xs.ravel().tolist()
    return list(xs)


def is_missing_label(v: Any) -> bool:
    if v is None:
        return True
    return isinstance(v, (float, np.floating)) and bool(np.isnan(v))


def _check_n_points(n_points: Any) -> int:
    if isinstance(n_points, bool) or not isinstance(n_points, (int, np.integer)):
        raise InvalidInput(f"n_points must be an integer, got {n_points!r}")
    if n_points < 2:
        raise InvalidInput(f"n_points must be >= 2, got {n_points}")
    return int(n_points)


def _partition(labels: List[Any], scores: np.ndarray,
               positive_marker: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Split present samples into (positive scores, negative scores)."""
    present = np.array([not is_missing_label(v) for v in labels], dtype=bool)
    is_pos = np.array([(not is_missing_label(v)) and bool(v == positive_marker) for v in labels],
                      dtype=bool)
    if not np.all(np.isfinite(scores[present])):
        raise InvalidInput("predicted scores must be finite numbers")
    return scores[is_pos], scores[present & ~is_pos]


def _count_at_or_above(sorted_scores: np.ndarray, thresholds: np.ndarray) -> np.ndarray:
    # searchsorted(side="left") is the index of the first score >= t
    return sorted_scores.size - np.searchsorted(sorted_scores, thresholds, side="left")


def build_roc_curve(true_labels: Sequence[Any],
                    predicted_scores: Sequence[float],
                    n_points: int = DEFAULT_N_POINTS,
                    positive_marker: Any = DEFAULT_POSITIVE_MARKER) -> ROCCurve:
    """
    Sweep ``n_points`` thresholds over [0, 1] and return the deduplicated curve.

    Labels equal to ``positive_marker`` are positives, any other label is a
    negative, and ``None``/NaN labels are left out of both counts.

    Raises:
        InvalidInput: length mismatch, empty input, ``n_points < 2`` or a
            non-finite score on a labelled sample.
        DegenerateInput: no positives or no negatives among the labelled samples.
    """
    n_points = _check_n_points(n_points)
    labels = as_label_list(true_labels)
    try:
        scores = np.asarray(predicted_scores, dtype=np.float64).ravel()
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"predicted scores must be numeric: {e}") from e
    if len(labels) != scores.size:
        raise InvalidInput(
            f"true_labels and predicted_scores differ in length ({len(labels)} vs {scores.size})"
        )
    if not labels:
        raise InvalidInput("true_labels and predicted_scores must not be empty")

    pos, neg = _partition(labels, scores, positive_marker)
    if pos.size == 0:
        raise DegenerateInput(f"no samples labelled {positive_marker!r}; TPR is undefined")
    if neg.size == 0:
        raise DegenerateInput(f"every sample is labelled {positive_marker!r}; FPR is undefined")

    thresholds = np.linspace(0.0, 1.0, n_points)
    tpr = _count_at_or_above(np.sort(pos), thresholds) / pos.size
    fpr = _count_at_or_above(np.sort(neg), thresholds) / neg.size

    kept: List[ROCPoint] = []
    seen = set()
    for f, t, thr in zip(fpr.tolist(), tpr.tolist(), thresholds.tolist()):
        if f in seen:
            continue
        seen.add(f)
        kept.append(ROCPoint(false_positive_rate=f, true_positive_rate=t, threshold=thr))
    return ROCCurve(points=tuple(kept))


def curve_area(curve: ROCCurve) -> float:
    """Trapezoid rule over consecutive points, in the order the curve holds them."""
    area = 0.0
    for prev, cur in zip(curve.points, curve.points[1:]):
        area += 0.5 * (prev.false_positive_rate - cur.false_positive_rate) * (
            prev.true_positive_rate + cur.true_positive_rate
        )
    return float(area)


def estimate_auc(true_labels: Sequence[Any],
                 predicted_scores: Sequence[float],
                 n_points: int = DEFAULT_N_POINTS,
                 positive_marker: Any = DEFAULT_POSITIVE_MARKER) -> float:
    """
    Area under :func:`build_roc_curve`. A curve thinned to a single point has
    area 0.0. Errors from the curve builder propagate unchanged.
    """
    curve = build_roc_curve(true_labels, predicted_scores, n_points, positive_marker)
    return curve_area(curve)


def one_vs_rest_auc(true_labels: Sequence[Any],
                    score_matrix,
                    classes: Optional[Sequence[Any]] = None,
                    n_points: int = DEFAULT_N_POINTS) -> Dict[Any, float]:
    """
    AUC per class, treating column ``k`` of ``score_matrix`` as the scores for
    ``classes[k]`` against everything else.

    ``classes`` defaults to the distinct labels in ``true_labels``, in order of
    first appearance.
    """
    labels = as_label_list(true_labels)
    try:
        m = np.asarray(score_matrix, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"score matrix must be numeric: {e}") from e
    if classes is None:
        classes = list(dict.fromkeys(v for v in labels if not is_missing_label(v)))
    classes = list(classes)
    if m.ndim != 2 or m.shape[0] != len(labels) or m.shape[1] != len(classes):
        raise InvalidInput(
            f"score matrix must have shape ({len(labels)}, {len(classes)}), got {m.shape}"
        )
    return {
        cls: estimate_auc(labels, m[:, k], n_points=n_points, positive_marker=cls)
        for k, cls in enumerate(classes)
    }
