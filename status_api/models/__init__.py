# Models package
from .device import Device
from .status_reading import StatusReading

__all__ = ['Device', 'StatusReading']
