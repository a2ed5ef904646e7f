# rocviz/lab/sim.py
import random
from typing import List, Tuple

KINDS = ("separable", "random", "overlap")


def _clip01(x: float) -> float:
    return min(1.0, max(0.0, x))


def simulate_scores(kind: str = "overlap", positives: int = 50, negatives: int = 50,
                    seed: int = 1337) -> Tuple[List[int], List[float]]:
    """
    Seeded synthetic (y_true, y_score) for exercising the ROC routines.

    - separable: every positive scores in [0.6, 1.0], every negative in [0.0, 0.4]
    - random:    scores uniform on [0, 1], independent of the label
    - overlap:   normal around 0.65 (positives) / 0.35 (negatives), clipped to [0, 1]
    """
    if kind not in KINDS:
        raise ValueError(f"unknown simulation kind {kind!r}; expected one of {KINDS}")
    if positives < 0 or negatives < 0:
        raise ValueError("positives and negatives must be >= 0")
    rnd = random.Random(seed)

    rows: List[Tuple[int, float]] = []
    for label, n in ((1, positives), (0, negatives)):
        for _ in range(n):
            if kind == "separable":
                s = rnd.uniform(0.6, 1.0) if label else rnd.uniform(0.0, 0.4)
            elif kind == "random":
                s = rnd.random()
            else:
                s = _clip01(rnd.gauss(0.65 if label else 0.35, 0.15))
            rows.append((label, s))

    rnd.shuffle(rows)
    return [r[0] for r in rows], [r[1] for r in rows]
