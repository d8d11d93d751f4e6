"""
Storage access for devices and status readings
"""

from contextlib import contextmanager
from typing import List

from sqlalchemy import and_, func, text
from sqlalchemy.exc import SQLAlchemyError
import structlog

from status_api.database.connection import Database
from status_api.models.device import Device
from status_api.models.status_reading import StatusReading
from status_api.schemas.status import StatusReadingResponse

logger = structlog.get_logger(__name__)

class StorageError(Exception):
    """The backing store was unreachable or rejected an operation"""

    def __init__(self, operation: str):
        super().__init__(f"storage operation failed: {operation}")
        self.operation = operation

class StatusStore:
    """Parameterized queries against the device and device_status tables"""

    def __init__(self, database: Database):
        self.database = database

    @contextmanager
    def _session(self, operation: str):
        db = None
        try:
            # Engine creation on first use can fail here too
            db = self.database.session()
            yield db
        except SQLAlchemyError as e:
            if db is not None:
                db.rollback()
            logger.error("Storage operation failed", operation=operation, error=str(e))
            raise StorageError(operation) from e
        finally:
            if db is not None:
                db.close()

    def count_devices_matching(self, device_id: int, device_key: str) -> int:
        """Count devices matching both id and key in a single predicate"""
        with self._session("count_devices_matching") as db:
            return db.query(func.count(Device.device_id)).filter(
                and_(
                    Device.device_id == device_id,
                    Device.device_key == device_key
                )
            ).scalar() or 0

    def insert_reading(self, device_id: int, uptime: int, temperature_c: int) -> StatusReadingResponse:
        """Insert one status reading; created_at is assigned by the store"""
        with self._session("insert_reading") as db:
            reading = StatusReading(
                device_id=device_id,
                uptime=uptime,
                temperature_c=temperature_c
            )
            db.add(reading)
            db.commit()
            db.refresh(reading)
            return StatusReadingResponse.model_validate(reading)

    def list_readings(self, device_id: int) -> List[StatusReadingResponse]:
        """All readings of a device in insertion order"""
        with self._session("list_readings") as db:
            readings = db.query(StatusReading).filter(
                StatusReading.device_id == device_id
            ).order_by(StatusReading.created_at, StatusReading.status_id).all()
            return [StatusReadingResponse.model_validate(r) for r in readings]

    def ping(self):
        """Run a trivial query through the shared pool"""
        with self._session("ping") as db:
            db.execute(text("SELECT 1"))
