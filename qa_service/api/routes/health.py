"""Health probes — /health answers while the process runs, /health/ready
only while the connection pool can reach the database."""

from fastapi import APIRouter, Request, Response, status

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def liveness():
    return {"status": "ok"}


@router.get("/ready")
async def readiness(request: Request, response: Response):
    db_manager = request.app.state.db_manager
    if db_manager is None or not await db_manager.health_check():
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "unavailable", "database": "unreachable"}
    return {"status": "ok", "database": "reachable"}
