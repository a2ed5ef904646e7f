# rocviz/server/roc_routes.py
from typing import Optional

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from rocviz.config import run_log_path
from rocviz.lab.grade import grade
from rocviz.metrics.errors import DegenerateInput, InvalidInput, RocInputError
from rocviz.metrics.roc import one_vs_rest_auc
from rocviz.svl.roc_spec import OvrRequest, RocRequest
from rocviz.svl.roc_verify import compute_roc
from .logging_utils import log_roc_run

router = APIRouter(prefix="/roc", tags=["roc"])


def _parse(model: type, payload: dict) -> BaseModel:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(400, f"bad roc request: {e}")


def _log(endpoint: str, n: int, n_points: int, auc: Optional[float], outcome: str) -> None:
    path = run_log_path()
    if path:
        log_roc_run(path, endpoint, n, n_points, auc, outcome)


def _error_response(endpoint: str, req, e: RocInputError) -> JSONResponse:
    if isinstance(e, DegenerateInput):
        kind, status = "degenerate_input", 422
    else:
        kind, status = "invalid_input", 400
    _log(endpoint, len(req.y_true), req.n_points, None, kind)
    return JSONResponse({"ok": False, "error": kind, "detail": str(e)}, status_code=status)


@router.post("/curve")
def roc_curve(payload: dict = Body(...)):
    req = _parse(RocRequest, payload)
    try:
        spec = compute_roc(req.y_true, req.y_score, req.n_points, req.positive_marker, req.title)
    except (InvalidInput, DegenerateInput) as e:
        return _error_response("curve", req, e)
    _log("curve", len(req.y_true), req.n_points, spec["auc"], "ok")
    return {"ok": True, "spec": spec}


@router.post("/auc")
def roc_auc(payload: dict = Body(...)):
    req = _parse(RocRequest, payload)
    try:
        result = grade(req.y_true, req.y_score, req.n_points, req.positive_marker)
    except (InvalidInput, DegenerateInput) as e:
        return _error_response("auc", req, e)
    _log("auc", len(req.y_true), req.n_points, result["estimated_auc"], "ok")
    return {"ok": True, "auc": result["estimated_auc"], "grade": result}


@router.post("/ovr")
def roc_ovr(payload: dict = Body(...)):
    req = _parse(OvrRequest, payload)
    try:
        aucs = one_vs_rest_auc(req.y_true, req.y_score, req.classes, req.n_points)
    except (InvalidInput, DegenerateInput) as e:
        return _error_response("ovr", req, e)
    _log("ovr", len(req.y_true), req.n_points, None, "ok")
    # JSON object keys are strings
    return {"ok": True, "auc": {str(k): v for k, v in aucs.items()}}
