# rocviz/lab/classifier.py
"""
The "classifier" collaborator: fit a scikit-learn model and turn it into
scores the ROC routines can consume.

    model = fit(X, y, {"kind": "random_forest", "params": {"n_estimators": 200}})
    y_score = score(model, X_test)
"""
from typing import Any, Dict, List, Optional

import numpy as np
from sklearn.ensemble import GradientBoostingClassifier, RandomForestClassifier
from sklearn.linear_model import LogisticRegression
from sklearn.svm import SVC

MODELS = {
    "logistic": lambda **kw: LogisticRegression(max_iter=1000, **kw),
    "random_forest": RandomForestClassifier,
    "gradient_boosting": GradientBoostingClassifier,
    # probability=True so predict_proba exists
    "svm": lambda **kw: SVC(probability=True, **kw),
}


def fit(features, labels, config: Optional[Dict[str, Any]] = None):
    config = config or {}
    kind = config.get("kind", "logistic")
    if kind not in MODELS:
        raise ValueError(f"unknown classifier kind {kind!r}; expected one of {sorted(MODELS)}")
    params = dict(config.get("params") or {})
    if "random_state" in config:
        params.setdefault("random_state", config["random_state"])
    model = MODELS[kind](**params)
    return model.fit(np.asarray(features), np.asarray(labels))


def score(model, features, positive_marker: Any = 1) -> List[float]:
    """Probability of ``positive_marker`` for each row of ``features``."""
    classes = list(model.classes_)
    if positive_marker not in classes:
        raise ValueError(f"model was not trained on class {positive_marker!r}")
    proba = model.predict_proba(np.asarray(features))
    return proba[:, classes.index(positive_marker)].tolist()


def score_matrix(model, features) -> np.ndarray:
    """Per-class probabilities; columns follow ``model.classes_``."""
    return model.predict_proba(np.asarray(features))
