# parcel_tracker/store.py
import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy.orm import Session

from .exceptions import ParcelNotFound
from .models import ParcelRow
from .schemas import Parcel

logger = logging.getLogger(__name__)


class ParcelStore:
    """Maps Parcel values to rows of the parcel table.

    The session is owned by the caller: the store commits each statement it
    issues but never closes the session. A failed statement is rolled back and
    its error re-raised unchanged.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _statement(self):
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def add(self, parcel: Parcel) -> int:
        row = ParcelRow(
            client=parcel.client,
            status=parcel.status,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        with self._statement():
            self.db.add(row)
            self.db.flush()
            number = row.number
        logger.debug("added parcel %s for client %s", number, parcel.client)
        return number

    def get(self, number: int) -> Parcel:
        with self._statement():
            row = self.db.query(ParcelRow).filter(ParcelRow.number == number).first()
            parcel = Parcel.model_validate(row) if row is not None else None
        if parcel is None:
            raise ParcelNotFound(number)
        return parcel

    def get_by_client(self, client: int) -> List[Parcel]:
        with self._statement():
            rows = self.db.query(ParcelRow).filter(ParcelRow.client == client).all()
            parcels = [Parcel.model_validate(row) for row in rows]
        logger.debug("client %s has %d parcel(s)", client, len(parcels))
        return parcels

    def set_address(self, number: int, address: str) -> None:
        self._update(number, {ParcelRow.address: address})

    def set_status(self, number: int, status: str) -> None:
        self._update(number, {ParcelRow.status: status})

    def delete(self, number: int) -> None:
        with self._statement():
            count = self.db.query(ParcelRow).filter(ParcelRow.number == number).delete()
        if count == 0:
            logger.warning("delete: parcel %s does not exist", number)
        else:
            logger.debug("deleted parcel %s", number)

    def _update(self, number: int, values: dict) -> None:
        with self._statement():
            count = self.db.query(ParcelRow).filter(ParcelRow.number == number).update(values)
        # a missing number is not an error
        if count == 0:
            logger.warning("update: parcel %s does not exist", number)
        else:
            logger.debug("updated parcel %s: %s", number, ", ".join(c.key for c in values))
