"""
Device status endpoint
"""

import json
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
import structlog

from status_api.database.connection import database
from status_api.services.authenticator import Authenticator
from status_api.services.storage import StatusStore
from status_api.services.status_handler import StatusHandler, StatusRequest

logger = structlog.get_logger(__name__)
router = APIRouter()

def get_status_store() -> StatusStore:
    return StatusStore(database)

def get_status_handler(store: StatusStore = Depends(get_status_store)) -> StatusHandler:
    return StatusHandler(Authenticator(store), store)

async def _read_json_body(request: Request):
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.info("Ignoring non-JSON request body", path=request.url.path)
        return None

@router.api_route("/status", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def device_status(request: Request, handler: StatusHandler = Depends(get_status_handler)):
    """Store a status reading (POST) or return the device's readings (GET)"""

    status_request = StatusRequest(
        method=request.method,
        headers=request.headers,
        body=await _read_json_body(request)
    )
    # Storage calls block, keep them off the event loop
    response = await run_in_threadpool(handler.handle, status_request)
    return JSONResponse(status_code=response.status_code, content=response.body)
