# parcel_tracker/main.py
import logging
import sys

from .config import settings
from .db import engine, get_db, init_db
from .exceptions import TrackerError
from .service import ParcelService, describe
from .store import ParcelStore

logger = logging.getLogger(__name__)

CLIENT = 1


def print_client_parcels(service: ParcelService, client: int) -> None:
    parcels = service.client_parcels(client)
    print(f"Parcels of client {client}: {len(parcels)}")
    for parcel in parcels:
        print("  " + describe(parcel))


def run(service: ParcelService, client: int = CLIENT) -> None:
    parcel = service.register(client, "Moscow, Pushkin st., 1")
    print("Registered: " + describe(parcel))
    print_client_parcels(service, client)

    service.change_address(parcel.number, "Saratov, Lenin st., 2")
    service.next_status(parcel.number)
    print_client_parcels(service, client)

    # no longer registered, so this is refused
    try:
        service.delete(parcel.number)
    except TrackerError as e:
        print(f"Not deleted: {e}")

    second = service.register(client, "Samara, Mira st., 3")
    print("Registered: " + describe(second))
    service.delete(second.number)
    print_client_parcels(service, client)


def main() -> int:
    logging.basicConfig(level=settings.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    init_db(engine)
    with get_db() as db:
        try:
            run(ParcelService(ParcelStore(db)))
        except Exception:
            logger.exception("parcel workflow failed")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
