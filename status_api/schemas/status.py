"""
Status reading Pydantic schemas
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime

# Range of the integer columns the readings are stored in
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

class StatusCreate(BaseModel):
    """Body of a status report sent by a device"""
    uptime: int = Field(..., ge=0, le=INT32_MAX, description="Device uptime")
    temperature: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Temperature reading, stored as temperature_c")

    @field_validator("uptime", "temperature", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        if isinstance(value, bool):
            raise ValueError("boolean is not an integer reading")
        return value

class StatusReadingResponse(BaseModel):
    """Schema for a stored status reading"""
    model_config = ConfigDict(from_attributes=True)

    status_id: int
    device_id: int
    uptime: int
    temperature_c: int
    created_at: datetime
