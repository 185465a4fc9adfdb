# parcel_tracker/__init__.py
from .exceptions import ParcelNotFound, ParcelStateError, TrackerError
from .schemas import Parcel, STATUS_DELIVERED, STATUS_REGISTERED, STATUS_SENT
from .service import ParcelService
from .store import ParcelStore

__all__ = [
    "Parcel",
    "ParcelNotFound",
    "ParcelService",
    "ParcelStateError",
    "ParcelStore",
    "STATUS_DELIVERED",
    "STATUS_REGISTERED",
    "STATUS_SENT",
    "TrackerError",
]
