"""
Device authentication against the device registry
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
import structlog

from status_api.services.storage import StatusStore

logger = structlog.get_logger(__name__)

# Upper bound of the integer device_id column
MAX_DEVICE_ID = 2**31 - 1

class AuthOutcome(str, Enum):
    NO_ACTION = "no_action"
    AUTHORIZED = "authorized"
    DENIED = "denied"

@dataclass(frozen=True)
class AuthResult:
    outcome: AuthOutcome
    device_id: Optional[int] = None

    @property
    def authorized(self) -> bool:
        return self.outcome is AuthOutcome.AUTHORIZED

def parse_device_id(value: Any) -> Optional[int]:
    """Return value as a positive integer, or None if it is not one"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        parsed = int(value.strip())
    else:
        return None
    return parsed if 0 < parsed <= MAX_DEVICE_ID else None

def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())

class Authenticator:
    """Checks a presented (device id, device key) pair.

    The key is compared by plain equality in the database. No hashing and no
    constant-time comparison is done.

    StorageError from the store is not caught here; callers must not treat it
    as a denial.
    """

    def __init__(self, store: StatusStore):
        self.store = store

    def authenticate(self, device_id: Any, device_key: Optional[str]) -> AuthResult:
        if _is_missing(device_id) or _is_missing(device_key):
            return AuthResult(AuthOutcome.NO_ACTION)

        parsed_id = parse_device_id(device_id)
        if parsed_id is None:
            # A malformed id cannot match any device
            logger.info("Rejected malformed device id")
            return AuthResult(AuthOutcome.DENIED)

        matches = self.store.count_devices_matching(parsed_id, device_key)
        if matches == 1:
            return AuthResult(AuthOutcome.AUTHORIZED, parsed_id)

        logger.info("Device authentication denied", device_id=parsed_id)
        return AuthResult(AuthOutcome.DENIED)
