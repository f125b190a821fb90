from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from kindctl.cluster.config import encoding
from kindctl.util.errors import ConfigLoadError

router = APIRouter()

class ValidateRequest(BaseModel):
    config: Optional[Dict[str, Any]] = None
    file: Optional[str] = None

class ValidateResponse(BaseModel):
    valid: bool
    errors: List[str] = []

@router.post("/validate", response_model=ValidateResponse)
def run_validate(req: ValidateRequest):
    if req.config is None and not req.file:
        raise HTTPException(status_code=400, detail="either config or file is required")
    try:
        cfg = encoding.parse(req.config) if req.config is not None else encoding.load(req.file)
    except ConfigLoadError as e:
        raise HTTPException(status_code=400, detail=f"error loading config: {e}")
    errs = cfg.validate()
    return ValidateResponse(valid=not errs, errors=errs.to_list())
