from .errors import RocInputError, InvalidInput, DegenerateInput
from .roc import (
    ROCPoint, ROCCurve, build_roc_curve, curve_area, estimate_auc, one_vs_rest_auc,
)

__all__ = [
    "RocInputError", "InvalidInput", "DegenerateInput",
    "ROCPoint", "ROCCurve", "build_roc_curve", "curve_area", "estimate_auc",
    "one_vs_rest_auc",
]
