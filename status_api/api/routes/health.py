"""
Liveness and database pool health endpoints
"""

from fastapi import APIRouter, Depends
import structlog

from status_api.api.routes.status import get_status_store
from status_api.services.storage import StatusStore, StorageError

logger = structlog.get_logger(__name__)
router = APIRouter()

SERVICE = {"service": "Device Status API", "version": "1.0.0"}

@router.get("/health")
async def health_check():
    """Process is up; does not touch the database"""
    return {"status": "healthy", **SERVICE}

@router.get("/health/detailed")
def detailed_health_check(store: StatusStore = Depends(get_status_store)):
    """Runs SELECT 1 through the shared pool and reports the pool state.

    The first call may create the engine; a bad URL or unreachable server
    is reported as ``disconnected`` like any other storage fault.
    """
    try:
        store.ping()
        db_status = "connected"
    except StorageError as e:
        logger.warning("Database health check failed", operation=e.operation)
        db_status = "disconnected"

    database = store.database
    return {
        "status": "healthy" if db_status == "connected" else "unhealthy",
        "database": db_status,
        "pool": {
            "initialized": database.is_initialized,
            "state": database.engine.pool.status() if database.is_initialized else None,
        },
        **SERVICE
    }
