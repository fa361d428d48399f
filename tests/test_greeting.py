from datetime import datetime

import pytest

from smartcommunity.greeting import Greeting, greet, greeting_for


@pytest.mark.parametrize(
    ("hour", "expected"),
    [
        (6, Greeting.MORNING),
        (12, Greeting.MORNING),
        (13, Greeting.AFTERNOON),
        (18, Greeting.AFTERNOON),
        (19, Greeting.EVENING),
        (23, Greeting.EVENING),
        (3, Greeting.AFTERNOON),
    ],
)
def test_greeting_for(hour, expected):
    assert greeting_for(hour) is expected


@pytest.mark.parametrize(
    ("hour", "text"),
    [(8, "上午好!"), (15, "下午好!"), (21, "晚上好!")],
)
def test_greeting_texts(hour, text):
    assert greeting_for(hour).text == text


def test_icons_follow_daylight():
    morning = greeting_for(8)
    afternoon = greeting_for(15)
    evening = greeting_for(21)
    assert morning.icon == afternoon.icon
    assert evening.icon != morning.icon


def test_greet_uses_given_time():
    assert greet(datetime(2025, 7, 12, 20, 54)) is Greeting.EVENING
    assert greet(datetime(2025, 7, 12, 8, 0)) is Greeting.MORNING


@pytest.mark.parametrize("hour", [-1, 24])
def test_out_of_range_hour(hour):
    with pytest.raises(ValueError):
        greeting_for(hour)