"""
Status request handling: authenticate a device, then store or return its readings
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from pydantic import ValidationError
import structlog

from status_api.services.authenticator import Authenticator, AuthOutcome
from status_api.services.storage import StatusStore, StorageError
from status_api.schemas.status import StatusCreate

logger = structlog.get_logger(__name__)

DEVICE_ID_HEADER = "x-device-id"
DEVICE_KEY_HEADER = "x-device-key"
DEVICE_ID_FIELD = "deviceID"

@dataclass
class StatusRequest:
    """Transport-independent view of one inbound request"""
    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[Any] = None

@dataclass
class HandlerResponse:
    status_code: int
    body: Dict[str, Any]

def no_action() -> HandlerResponse:
    return HandlerResponse(200, {"status": "No action"})

def ok(data=None) -> HandlerResponse:
    body = {"status": "OK"}
    if data is not None:
        body["data"] = data
    return HandlerResponse(200, body)

def invalid_payload() -> HandlerResponse:
    return HandlerResponse(400, {"status": "invalid payload"})

def unauthorized() -> HandlerResponse:
    return HandlerResponse(401, {"status": "invalid authorization or device"})

def method_not_allowed() -> HandlerResponse:
    return HandlerResponse(405, {"status": "method not allowed"})

def storage_unavailable() -> HandlerResponse:
    return HandlerResponse(503, {"status": "storage unavailable"})

class StatusHandler:
    """Maps one request to an authentication check plus CREATE or RETRIEVE"""

    def __init__(self, authenticator: Authenticator, store: StatusStore):
        self.authenticator = authenticator
        self.store = store

    def handle(self, request: StatusRequest) -> HandlerResponse:
        method = request.method.upper()
        headers = {k.lower(): v for k, v in request.headers.items()}
        body = request.body if isinstance(request.body, dict) else {}

        device_key = headers.get(DEVICE_KEY_HEADER)
        if method == "POST":
            device_id = body.get(DEVICE_ID_FIELD)
            if device_id is None or device_id == "":
                device_id = headers.get(DEVICE_ID_HEADER)
        else:
            device_id = headers.get(DEVICE_ID_HEADER)

        try:
            result = self.authenticator.authenticate(device_id, device_key)
            if result.outcome is AuthOutcome.NO_ACTION:
                return no_action()
            if not result.authorized:
                return unauthorized()

            if method == "POST":
                return self._create(result.device_id, body)
            if method == "GET":
                return self._retrieve(result.device_id)
            return method_not_allowed()
        except StorageError as e:
            logger.error("Status request failed on storage", method=method, operation=e.operation)
            return storage_unavailable()

    def _create(self, device_id: int, body: Dict[str, Any]) -> HandlerResponse:
        try:
            payload = StatusCreate.model_validate(body)
        except ValidationError as e:
            logger.info("Invalid status payload", device_id=device_id, errors=e.error_count())
            return invalid_payload()

        reading = self.store.insert_reading(device_id, payload.uptime, payload.temperature)
        logger.info("Status reading stored", device_id=device_id, status_id=reading.status_id)
        return ok()

    def _retrieve(self, device_id: int) -> HandlerResponse:
        readings = self.store.list_readings(device_id)
        logger.info("Status readings retrieved", device_id=device_id, count=len(readings))
        return ok([r.model_dump(mode="json") for r in readings])
