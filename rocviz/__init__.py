from rocviz.metrics import (
    ROCPoint, ROCCurve, build_roc_curve, estimate_auc, one_vs_rest_auc,
    RocInputError, InvalidInput, DegenerateInput,
)

__version__ = "0.1.0"
