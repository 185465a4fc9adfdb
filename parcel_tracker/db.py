# parcel_tracker/db.py
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings


def create_db_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    url = url or settings.database_url
    echo = settings.db_echo if echo is None else echo
    if ":memory:" in url or "mode=memory" in url:
        # one shared connection, otherwise every checkout sees an empty database
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False},
                             poolclass=StaticPool)
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(url, echo=echo)


engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(bind: Optional[Engine] = None) -> None:
    # import models so classes register to Base
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


@contextmanager
def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
