import pytest

from fieldkit.ntp import (
    EPOCH_2000,
    RtcInfo,
    datetime_to_ntp,
    format_datetime,
    ntp_to_datetime,
)

# (ntp time, (year, month, day, hours, minutes, seconds))
VALID_CASES = [
    (3155673600, (0, 1, 1, 0, 0, 0)),
    (3155673600 + 3600, (0, 1, 1, 1, 0, 0)),
    (3155673600 + 86400, (0, 1, 2, 0, 0, 0)),
    (3155673600 + 90000, (0, 1, 2, 1, 0, 0)),
    (3155673600 + 31536000, (0, 12, 31, 0, 0, 0)),
    (3155673600 + 31622400, (1, 1, 1, 0, 0, 0)),
    (3761917500, (19, 3, 18, 17, 5, 0)),
    (4294967295, (36, 2, 7, 6, 28, 15)),
    (3155673600 + 60, (0, 1, 1, 0, 1, 0)),
    (3155673600 + 126230399, (3, 12, 31, 23, 59, 59)),
    (3155673600 + 126230400, (4, 1, 1, 0, 0, 0)),
    (3155673600 + 126230401, (4, 1, 1, 0, 0, 1)),
    (4028012072, (27, 8, 23, 12, 14, 32)),
    (3788611693, (20, 1, 21, 16, 8, 13)),
]


def _rtc(fields):
    year, month, day, hours, minutes, seconds = fields
    return RtcInfo(year=year, month=month, day=day, hours=hours,
                   minutes=minutes, seconds=seconds)


@pytest.mark.parametrize("ntp_time, fields", VALID_CASES)
def test_ntp_to_datetime(ntp_time, fields):
    result = ntp_to_datetime(ntp_time)
    assert result.same_moment(_rtc(fields))


@pytest.mark.parametrize("ntp_time, fields", VALID_CASES)
def test_datetime_to_ntp(ntp_time, fields):
    assert datetime_to_ntp(_rtc(fields)) == ntp_time


@pytest.mark.parametrize("ntp_time", [3155673599, 0])
def test_times_before_2000_are_rejected(ntp_time):
    with pytest.raises(ValueError):
        ntp_to_datetime(ntp_time)


@pytest.mark.parametrize("ntp_time", [-1, 4294967296])
def test_times_outside_32_bits_are_rejected(ntp_time):
    with pytest.raises(ValueError):
        ntp_to_datetime(ntp_time)


def test_mismatched_pair_is_not_equal():
    result = ntp_to_datetime(3788611693)
    assert not result.same_moment(_rtc((0, 1, 9, 2, 0, 0)))


def test_weekday_defaults_to_sunday():
    assert ntp_to_datetime(EPOCH_2000).weekday == 0x07


@pytest.mark.parametrize("ntp_time", range(EPOCH_2000, 4294967295, 7777777))
def test_round_trip(ntp_time):
    assert datetime_to_ntp(ntp_to_datetime(ntp_time)) == ntp_time


def test_format_max_time():
    assert format_datetime(ntp_to_datetime(4294967295)) == "06:28:15 07 Feb 2036"


def test_format_rejects_bad_month():
    with pytest.raises(ValueError):
        format_datetime(RtcInfo(month=13))