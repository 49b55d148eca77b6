from datetime import datetime, timedelta, timezone
from pytz import UTC

from fieldvisit.temporal import print_temporal


def test_print_naive():
    assert print_temporal(datetime(2017, 3, 15, 10, 30, 0)) == "2017-03-15T10:30:00"


def test_print_utc():
    assert print_temporal(datetime(2017, 3, 15, 10, 30, 0, tzinfo=UTC)) == "2017-03-15T10:30:00Z"


def test_print_offset_kept():
    tz = timezone(timedelta(hours=-5))
    assert print_temporal(datetime(2017, 3, 15, 10, 30, 0, tzinfo=tz)) == "2017-03-15T10:30:00-05:00"


def test_print_fraction():
    assert print_temporal(datetime(2017, 3, 15, 10, 30, 0, 500000)) == "2017-03-15T10:30:00.500000"


def test_print_none():
    assert print_temporal(None) is None
