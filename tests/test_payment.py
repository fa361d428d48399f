from datetime import datetime

import pytest

from smartcommunity.database import Database
from smartcommunity.payment import confirm_payment


@pytest.fixture
def db(tmp_path):
    with Database(tmp_path / "community.db") as database:
        database.create_schema()
        yield database


def _status(db, payment_id):
    return db.query("SELECT status FROM payment WHERE id = ?", (payment_id,))[0][0]


def test_confirm_marks_paid(db):
    when = datetime(2025, 7, 1, 9, 30, 0)
    payment_id = db.add_payment(1, "water", "35.5", 0, when)
    assert confirm_payment(db, "water", when, "35.5") == 1
    assert _status(db, payment_id) == 1


def test_confirm_accepts_string_time(db):
    when = datetime(2025, 7, 1, 9, 30, 0)
    payment_id = db.add_payment(1, "power", "80", 0, when)
    assert confirm_payment(db, "power", "2025-07-01 09:30:00", "80") == 1
    assert _status(db, payment_id) == 1


def test_confirm_without_match_changes_nothing(db):
    when = datetime(2025, 7, 1, 9, 30, 0)
    payment_id = db.add_payment(1, "water", "35.5", 0, when)
    assert confirm_payment(db, "water", when, "99") == 0
    assert _status(db, payment_id) == 0