# parcel_tracker/exceptions.py


class TrackerError(Exception):
    """Base class for errors raised by the tracker itself.

    Database failures are not wrapped: SQLAlchemy errors reach the caller as-is.
    """


class ParcelNotFound(TrackerError):
    """Raised when no parcel row matches the requested number."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"parcel {number} not found")


class ParcelStateError(TrackerError):
    """Raised when an operation is not allowed in the parcel's current status."""

    def __init__(self, number: int, status: str, action: str):
        self.number = number
        self.status = status
        self.action = action
        super().__init__(f"cannot {action} parcel {number} with status {status!r}")


class InvalidStatusTransition(TrackerError):
    """Raised when a parcel's status has no known successor."""

    def __init__(self, number: int, status: str):
        self.number = number
        self.status = status
        super().__init__(f"parcel {number} has unknown status {status!r}")
