import pytest

from tempsdejeu.utils import ceil_minutes, fmt_match_minute, fmt_mmss, fmt_short


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "00:00"), (59.9, "00:59"), (90, "01:30"), (2700, "45:00"), (-5, "00:00")],
)
def test_fmt_mmss(seconds, expected):
    assert fmt_mmss(seconds) == expected


def test_fmt_short():
    assert fmt_short(150) == "2'30"
    assert fmt_short(45) == "45s"


def test_fmt_match_minute_shows_added_time():
    assert fmt_match_minute(1260, 2700) == "21'"
    assert fmt_match_minute(2890, 2700) == "45+3'"


def test_ceil_minutes():
    assert ceil_minutes(0) == 0
    assert ceil_minutes(-30) == 0
    assert ceil_minutes(60) == 1
    assert ceil_minutes(61) == 2
