"""Confirming an owner's pending payment."""

from __future__ import annotations

from datetime import datetime

from smartcommunity.database import Database


def confirm_payment(
    db: Database, payment_type: str, time: datetime | str, amount: str
) -> int:
    """Mark the payments with this type, time and amount as paid; return the count."""
    return db.update_payment(payment_type, time, amount)