from datetime import datetime, timedelta, timezone

from wordcrawl.utils.datetime_utils import format_duration, format_rfc1123, utc_now


def test_utc_now_is_aware():
    now = utc_now()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)


def test_format_rfc1123_converts_to_gmt():
    dt = datetime(2026, 10, 19, 10, 30, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_rfc1123(dt) == "Mon, 19 Oct 2026 08:30:00 GMT"


def test_format_rfc1123_treats_naive_as_utc():
    assert format_rfc1123(datetime(2026, 10, 20, 8, 15, 0)) == "Tue, 20 Oct 2026 08:15:00 GMT"


def test_format_duration_splits_units():
    assert format_duration(timedelta(minutes=2, seconds=3, milliseconds=45)) == "2m 3s 45ms"


def test_format_duration_zero():
    assert format_duration(timedelta(0)) == "0m 0s 0ms"


def test_format_duration_minutes_do_not_wrap():
    assert format_duration(timedelta(hours=1, milliseconds=1)) == "60m 0s 1ms"


def test_format_duration_truncates_sub_millisecond():
    assert format_duration(timedelta(microseconds=1999)) == "0m 0s 1ms"
