"""Parking spots: registering, editing and renting them to owners."""

from __future__ import annotations

from dataclasses import dataclass

from smartcommunity.database import Database

LARGE = "大"
SMALL = "小"
HAS_CHARGER = "有"
NO_CHARGER = "无"

_SIZE_CODES = {LARGE: 1, SMALL: 0}
_CHARGE_CODES = {HAS_CHARGER: 1, NO_CHARGER: 0}


class NoApplicationError(LookupError):
    """Raised when no owner has applied for a spot that is to be rented."""

    def __init__(self, spot_id: int) -> None:
        super().__init__(f"暂无业主申请该车位，无法出租 (spot {spot_id})")
        self.spot_id = spot_id


@dataclass(frozen=True)
class ParkingSpot:
    """A parking spot as stored in the database."""

    id: int
    location: str
    floor: int
    size: int
    rechargeable: bool
    status: int
    owner_id: int
    outdate: str | None


@dataclass(frozen=True)
class RentApplication:
    """An owner's application to rent a parking spot."""

    owner_id: int
    outdate: str | None
    fee: str | None


def parse_size(text: str) -> int:
    """Return 1 for a large spot and 0 for any other size."""
    code = _SIZE_CODES.get(text)
    if code is None:
        code = 0
    return code


def parse_charge(text: str) -> int:
    """Return 1 if the spot has a charger and 0 otherwise."""
    code = _CHARGE_CODES.get(text)
    if code is None:
        code = 0
    return code


def _changes(db: Database) -> int:
    return db.query("SELECT changes()")[0][0]


def add_spot(
    db: Database, location: str, floor: int | str, size: int, rechargeable: bool | int
) -> int:
    """Register a free, unowned spot and return its id."""
    db.query(
        "INSERT INTO parking_spot (location, floor, size, is_rechargeable, status, owner_id)"
        " VALUES (?, ?, ?, ?, 0, 0)",
        (location, int(floor), int(size), int(bool(rechargeable))),
    )
    return db.query("SELECT last_insert_rowid()")[0][0]


def update_spot(
    db: Database,
    spot_id: int,
    location: str,
    floor: int | str,
    size: int,
    rechargeable: bool | int,
) -> bool:
    """Edit a spot, freeing it from any owner; return whether it existed."""
    db.query(
        "UPDATE parking_spot SET location = ?, floor = ?, size = ?, is_rechargeable = ?,"
        " status = ?, owner_id = ? WHERE id = ?",
        (location, int(floor), int(size), int(bool(rechargeable)), 0, 0, spot_id),
    )
    return _changes(db) > 0


def get_spot(db: Database, spot_id: int) -> ParkingSpot:
    """Return the spot with this id, raising KeyError if there is none."""
    rows = db.query("SELECT * FROM parking_spot WHERE id = ?", (spot_id,))
    if not rows:
        raise KeyError(spot_id)
    row = rows[0]
    return ParkingSpot(
        id=row["id"],
        location=row["location"],
        floor=row["floor"],
        size=row["size"],
        rechargeable=bool(row["is_rechargeable"]),
        status=row["status"],
        owner_id=row["owner_id"],
        outdate=row["outdate"],
    )


def find_rent_application(db: Database, spot_id: int) -> RentApplication | None:
    """Return the earliest application matching the spot, or None."""
    spot = get_spot(db, spot_id)
    rows = db.query(
        "SELECT owner_id, outdate, fee FROM parking_application"
        " WHERE floor = ? AND is_rechargeable = ? AND size = ?"
        " ORDER BY apply_time ASC LIMIT 1",
        (spot.floor, int(spot.rechargeable), spot.size),
    )
    if not rows:
        return None
    row = rows[0]
    return RentApplication(
        owner_id=row["owner_id"], outdate=row["outdate"], fee=row["fee"]
    )


def rent_spot(db: Database, spot_id: int) -> RentApplication:
    """Rent the spot to the earliest matching applicant and return the application."""
    application = find_rent_application(db, spot_id)
    if application is None:
        raise NoApplicationError(spot_id)
    db.query(
        "UPDATE parking_spot SET outdate = ?, status = ?, owner_id = ? WHERE id = ?",
        (application.outdate, 1, application.owner_id, spot_id),
    )
    db.query(
        "UPDATE owner SET parking_spot_id = ? WHERE id = ?",
        (spot_id, application.owner_id),
    )
    return application