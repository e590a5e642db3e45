"""
Storage models package.
"""

from .models import AdminState, Base, DeviceService, OperatingState

__all__ = ["Base", "DeviceService", "OperatingState", "AdminState"]
