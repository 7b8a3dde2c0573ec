"""Health check endpoints."""

from fastapi import APIRouter, Request
from sqlalchemy import text

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Liveness check.
    Returns 200 OK if the service is running.
    """
    return {"status": "healthy", "service": "task-manager"}


@router.get("/ready")
def readiness_check(request: Request):
    """
    Readiness check.
    Returns 200 OK once the database answers a trivial query.
    """
    with request.app.state.engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return {"status": "ready", "service": "task-manager"}
