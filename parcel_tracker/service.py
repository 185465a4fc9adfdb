# parcel_tracker/service.py
import logging
from datetime import datetime, timezone
from typing import List, Optional

from .exceptions import InvalidStatusTransition, ParcelStateError
from .schemas import Parcel, STATUS_DELIVERED, STATUS_REGISTERED, STATUS_SENT
from .store import ParcelStore

logger = logging.getLogger(__name__)

NEXT_STATUS = {
    STATUS_REGISTERED: STATUS_SENT,
    STATUS_SENT: STATUS_DELIVERED,
    STATUS_DELIVERED: STATUS_DELIVERED,
}


def now_rfc3339(now: Optional[datetime] = None) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def describe(parcel: Parcel) -> str:
    return (f"Parcel #{parcel.number} to {parcel.address} for client {parcel.client}, "
            f"registered {parcel.created_at}, status {parcel.status}")


class ParcelService:
    """Parcel workflow on top of ParcelStore.

    Address changes and deletion are only allowed while a parcel is still
    registered; statuses advance registered -> sent -> delivered.
    """

    def __init__(self, store: ParcelStore):
        self.store = store

    def register(self, client: int, address: str, created_at: Optional[str] = None) -> Parcel:
        parcel = Parcel(
            client=client,
            status=STATUS_REGISTERED,
            address=address,
            created_at=created_at if created_at is not None else now_rfc3339(),
        )
        parcel.number = self.store.add(parcel)
        logger.info("registered parcel %s for client %s to %s", parcel.number, client, address)
        return parcel

    def client_parcels(self, client: int) -> List[Parcel]:
        return self.store.get_by_client(client)

    def next_status(self, number: int) -> str:
        parcel = self.store.get(number)
        try:
            status = NEXT_STATUS[parcel.status]
        except KeyError:
            raise InvalidStatusTransition(number, parcel.status) from None
        if status != parcel.status:
            self.store.set_status(number, status)
            logger.info("parcel %s: %s -> %s", number, parcel.status, status)
        return status

    def change_address(self, number: int, address: str) -> None:
        self._require_registered(number, "change address of")
        self.store.set_address(number, address)
        logger.info("parcel %s: address changed to %s", number, address)

    def delete(self, number: int) -> None:
        self._require_registered(number, "delete")
        self.store.delete(number)
        logger.info("parcel %s deleted", number)

    def _require_registered(self, number: int, action: str) -> Parcel:
        parcel = self.store.get(number)
        if parcel.status != STATUS_REGISTERED:
            raise ParcelStateError(number, parcel.status, action)
        return parcel
