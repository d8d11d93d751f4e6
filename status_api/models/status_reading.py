"""
Status reading model for device telemetry samples
"""

from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from status_api.database.connection import Base

class StatusReading(Base):
    """One uptime/temperature sample reported by a device"""

    __tablename__ = "device_status"

    status_id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("device.device_id"), nullable=False, index=True)
    uptime = Column(Integer, nullable=False)
    temperature_c = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    # Relationship
    device = relationship("Device", back_populates="readings")

    def __repr__(self):
        return f"<StatusReading(device_id={self.device_id}, uptime={self.uptime}, temperature_c={self.temperature_c})>"
