# rocviz/svl/roc_spec.py
from math import isfinite
from typing import List, Optional, Union

from pydantic import BaseModel, Field, conlist, field_validator, model_validator

from rocviz.config import default_n_points, max_n_points

Label = Union[int, float, str]


class RocSpec(BaseModel):
    title: str = Field(default="ROC Curve", max_length=120)
    fpr: conlist(float, min_length=1)
    tpr: conlist(float, min_length=1)
    thresholds: conlist(float, min_length=1)
    auc: float = Field(ge=0.0)
    n_points: int = Field(ge=2)
    x_label: str = "False Positive Rate"
    y_label: str = "True Positive Rate"
    alt_text: str = Field(
        default="ROC curve showing model trade-off.",
        min_length=10, max_length=240
    )

    @field_validator("fpr", "tpr", "thresholds")
    @classmethod
    def values_in_unit_interval(cls, v):
        if not all(isfinite(x) and 0.0 <= x <= 1.0 for x in v):
            raise ValueError("ROC values must be within [0,1].")
        return v

    @model_validator(mode="after")
    def check_curve(self):
        if not (len(self.fpr) == len(self.tpr) == len(self.thresholds)):
            raise ValueError("fpr, tpr and thresholds must have the same length.")
        if len(set(self.fpr)) != len(self.fpr):
            raise ValueError("fpr values must be unique along the curve.")
        return self


def _none_to_nan(scores: List[Optional[float]]) -> List[float]:
    return [float("nan") if s is None else s for s in scores]


def _check_grid_size(v: int) -> int:
    limit = max_n_points()
    if v > limit:
        raise ValueError(f"n_points must be <= {limit}")
    return v


class RocRequest(BaseModel):
    # null labels are treated as missing samples; their scores may be null too
    y_true: conlist(Optional[Label], min_length=1)
    y_score: conlist(Optional[float], min_length=1)
    n_points: int = Field(default_factory=default_n_points)
    positive_marker: Label = 1
    title: str = "ROC Curve"

    @field_validator("y_score")
    @classmethod
    def null_scores_to_nan(cls, v):
        return _none_to_nan(v)

    @field_validator("n_points")
    @classmethod
    def grid_not_too_large(cls, v):
        return _check_grid_size(v)


class OvrRequest(BaseModel):
    y_true: conlist(Optional[Label], min_length=1)
    # one row per sample, one column per class
    y_score: conlist(List[Optional[float]], min_length=1)
    classes: Optional[List[Label]] = None
    n_points: int = Field(default_factory=default_n_points)

    @field_validator("y_score")
    @classmethod
    def null_scores_to_nan(cls, v):
        return [_none_to_nan(row) for row in v]

    @field_validator("n_points")
    @classmethod
    def grid_not_too_large(cls, v):
        return _check_grid_size(v)
