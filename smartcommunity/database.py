"""SQLite storage for users, owners, payments, parking spots and property files."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Sequence
from datetime import datetime
from os import PathLike
from typing import Any

DEFAULT_PATH = "sql1.db"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS Users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL,
    role INTEGER NOT NULL,
    name TEXT,
    department TEXT,
    position TEXT
);
CREATE TABLE IF NOT EXISTS owner (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    telephone TEXT UNIQUE,
    building_number TEXT,
    unit_number TEXT,
    floor_number TEXT,
    room_number TEXT,
    parking_spot_id INTEGER DEFAULT 0
);
CREATE TABLE IF NOT EXISTS payment (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner_id INTEGER,
    type TEXT,
    amount TEXT,
    status INTEGER DEFAULT 0,
    create_time TEXT
);
CREATE TABLE IF NOT EXISTS parking_spot (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    location TEXT,
    floor INTEGER,
    size INTEGER,
    is_rechargeable INTEGER,
    status INTEGER DEFAULT 0,
    owner_id INTEGER DEFAULT 0,
    outdate TEXT
);
CREATE TABLE IF NOT EXISTS parking_application (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner_id INTEGER,
    floor INTEGER,
    is_rechargeable INTEGER,
    size INTEGER,
    apply_time TEXT,
    outdate TEXT,
    fee TEXT
);
CREATE TABLE IF NOT EXISTS owner_property (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner_id INTEGER,
    name TEXT,
    application_for_real_estate_registration INTEGER DEFAULT 0,
    identity_proof_materials INTEGER DEFAULT 0,
    documents_on_the_origin_and_proof_of_real_estate_ownership INTEGER DEFAULT 0,
    materials_on_real_estate_boundaries INTEGER DEFAULT 0,
    spatial_limits INTEGER DEFAULT 0,
    area INTEGER DEFAULT 0,
    explanatory_materials_on_stakeholder_relationships_with_others INTEGER DEFAULT 0,
    commercial_housing_sales_contract INTEGER DEFAULT 0,
    tax_payment_certificate INTEGER DEFAULT 0,
    maintenance_fund_receipt INTEGER DEFAULT 0
);
"""


def _format_time(value: datetime | str) -> str:
    if isinstance(value, datetime):
        return value.strftime(TIME_FORMAT)
    return value


class Database:
    """A connection to the community database."""

    def __init__(self, path: str | PathLike[str] = DEFAULT_PATH) -> None:
        self.path = path
        self._conn = sqlite3.connect(path)
        self._conn.row_factory = sqlite3.Row

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def create_schema(self) -> None:
        """Create every table the application uses, if missing."""
        with self._conn:
            self._conn.executescript(_SCHEMA)

    def query(self, sql: str, params: Iterable[Any] = ()) -> list[sqlite3.Row]:
        """Run one statement with positional parameters and return its rows."""
        with self._conn:
            cursor = self._conn.execute(sql, tuple(params))
            return cursor.fetchall()

    def _execute(self, sql: str, params: Sequence[Any]) -> sqlite3.Cursor:
        with self._conn:
            return self._conn.execute(sql, tuple(params))

    def _first(self, sql: str, params: Sequence[Any]) -> sqlite3.Row | None:
        return self._conn.execute(sql, tuple(params)).fetchone()

    def get_user_by_username(self, username: str) -> sqlite3.Row | None:
        """Return the user row with this username, or None."""
        return self._first("SELECT * FROM Users WHERE username = ?", (username,))

    def get_username_by_id(self, user_id: int) -> str | None:
        """Return the username of the user with this id, or None."""
        row = self._first("SELECT username FROM Users WHERE id = ?", (user_id,))
        return None if row is None else row["username"]

    def get_user_id_by_username(self, username: str) -> int | None:
        """Return the id of the user with this username, or None."""
        row = self._first("SELECT id FROM Users WHERE username = ?", (username,))
        return None if row is None else row["id"]

    def get_payment_id_by_time(self, time: datetime | str) -> int | None:
        """Return the id of the payment created at this time, or None."""
        row = self._first(
            "SELECT id FROM payment WHERE create_time = ?", (_format_time(time),)
        )
        return None if row is None else row["id"]

    def add_user(
        self,
        username: str,
        password: str,
        role: int | str,
        name: str,
        department: str,
        position: str,
    ) -> bool:
        """Add a user; return False if the username is already taken."""
        if self.get_user_by_username(username) is not None:
            return False
        self._execute(
            "INSERT INTO Users (username, password, role, name, department, position)"
            " VALUES (?, ?, ?, ?, ?, ?)",
            (username, password, role, name, department, position),
        )
        return True

    def add_owner(
        self,
        name: str,
        telephone: str,
        building: str,
        unit: str,
        floor: str,
        room: str,
    ) -> bool:
        """Add an owner; return False if the telephone is already registered."""
        existing = self._first("SELECT id FROM owner WHERE telephone = ?", (telephone,))
        if existing is not None:
            return False
        self._execute(
            "INSERT INTO owner (name, telephone, building_number, unit_number,"
            " floor_number, room_number) VALUES (?, ?, ?, ?, ?, ?)",
            (name, telephone, building, unit, floor, room),
        )
        return True

    def add_payment(
        self,
        owner_id: int,
        payment_type: str,
        amount: str,
        status: int,
        create_time: datetime | str,
    ) -> int:
        """Record a payment and return its id."""
        cursor = self._execute(
            "INSERT INTO payment (owner_id, type, amount, status, create_time)"
            " VALUES (?, ?, ?, ?, ?)",
            (owner_id, payment_type, amount, status, _format_time(create_time)),
        )
        return cursor.lastrowid

    def update_staff(
        self, user_id: int, name: str, department: str, position: str
    ) -> bool:
        """Update a staff member's details; return whether a row changed."""
        cursor = self._execute(
            "UPDATE Users SET name = ?, department = ?, position = ? WHERE id = ?",
            (name, department, position, user_id),
        )
        return cursor.rowcount > 0

    def update_owner(
        self,
        owner_id: int,
        telephone: str,
        building: str,
        unit: str,
        floor: str,
        room: str,
    ) -> bool:
        """Update an owner's contact and address; return whether a row changed."""
        cursor = self._execute(
            "UPDATE owner SET telephone = ?, building_number = ?, unit_number = ?,"
            " floor_number = ?, room_number = ? WHERE id = ?",
            (telephone, building, unit, floor, room, owner_id),
        )
        return cursor.rowcount > 0

    def update_payment(
        self, payment_type: str, time: datetime | str, amount: str
    ) -> int:
        """Mark matching payments as paid and return how many were updated."""
        cursor = self._execute(
            "UPDATE payment SET status = 1"
            " WHERE type = ? AND create_time = ? AND amount = ?",
            (payment_type, _format_time(time), amount),
        )
        return cursor.rowcount