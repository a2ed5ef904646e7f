import pytest

from rocviz.lab.sim import simulate_scores


def test_simulate_is_seeded():
    assert simulate_scores("overlap", 20, 30, seed=1) == simulate_scores("overlap", 20, 30, seed=1)
    assert simulate_scores("overlap", 20, 30, seed=1) != simulate_scores("overlap", 20, 30, seed=2)


def test_simulate_counts_and_range():
    for kind in ("separable", "random", "overlap"):
        y_true, y_score = simulate_scores(kind, positives=15, negatives=25, seed=9)
        assert len(y_true) == len(y_score) == 40
        assert sum(y_true) == 15
        assert all(0.0 <= s <= 1.0 for s in y_score)


def test_separable_scores_do_not_overlap():
    y_true, y_score = simulate_scores("separable", 30, 30, seed=4)
    pos = [s for y, s in zip(y_true, y_score) if y == 1]
    neg = [s for y, s in zip(y_true, y_score) if y == 0]
    assert min(pos) > max(neg)


def test_simulate_rejects_unknown_kind():
    with pytest.raises(ValueError):
        simulate_scores("bimodal")
    with pytest.raises(ValueError):
        simulate_scores("random", positives=-1)
