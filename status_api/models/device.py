"""
Device model for registered telemetry devices
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from status_api.database.connection import Base

class Device(Base):
    """Device allowed to report status readings, identified by id and shared key"""

    __tablename__ = "device"

    device_id = Column(Integer, primary_key=True, autoincrement=True)
    device_key = Column(String(255), unique=True, nullable=False)
    name = Column(String(255))
    description = Column(Text)
    location = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    readings = relationship("StatusReading", back_populates="device")

    def __repr__(self):
        # never include device_key
        return f"<Device(id={self.device_id}, name={self.name})>"
