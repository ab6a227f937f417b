from __future__ import annotations

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

router = APIRouter()


@router.get("/health")
def liveness():
    return {"status": "ok"}


@router.get("/health/ready")
def readiness(request: Request):
    """Readiness reflects whether the database can be reached."""
    if not request.app.state.db.ping():
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "problems": ["database_unreachable"]},
        )
    return {"status": "ready"}
