# parcel_tracker/schemas.py
from pydantic import BaseModel, ConfigDict

# statuses recognised by ParcelService; the store accepts any string
STATUS_REGISTERED = "registered"
STATUS_SENT = "sent"
STATUS_DELIVERED = "delivered"


class Parcel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    number: int = 0  # 0 until the store assigns one
    client: int
    status: str
    address: str
    created_at: str
