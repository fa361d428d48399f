"""Time-of-day greetings shown to a logged-in user."""

from __future__ import annotations

from datetime import datetime
from enum import Enum


class Greeting(Enum):
    """A greeting with the icon shown beside it."""

    MORNING = ("上午好!", "sun.png")
    AFTERNOON = ("下午好!", "sun.png")
    EVENING = ("晚上好!", "moon.png")

    def __init__(self, text: str, icon: str) -> None:
        self.text = text
        self.icon = icon


def greeting_for(hour: int) -> Greeting:
    """Return the greeting for an hour of the day (0 to 23)."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range: {hour}")
    if 6 <= hour <= 12:
        return Greeting.MORNING
    if hour <= 18:
        return Greeting.AFTERNOON
    return Greeting.EVENING


def greet(now: datetime | None = None) -> Greeting:
    """Return the greeting for the given moment, or for the current time."""
    moment = datetime.now() if now is None else now
    return greeting_for(moment.hour)