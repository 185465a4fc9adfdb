# parcel_tracker/models.py
from sqlalchemy import Column, Integer, String

from .db import Base


# one row per parcel; number is assigned by the database
class ParcelRow(Base):
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}  # numbers of deleted parcels are never reused
    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, index=True, nullable=False)
    status = Column(String, nullable=False)
    address = Column(String, nullable=False)
    created_at = Column(String, nullable=False)  # RFC 3339 text, stored as given

    def __repr__(self):
        return f"<ParcelRow(number={self.number}, client={self.client}, status='{self.status}')>"
