"""Conversion between NTP seconds and RTC-style calendar dates from 2000 on."""

from __future__ import annotations

from dataclasses import dataclass

EPOCH_2000 = 3155673600
"""NTP seconds (since 1900) at 00:00:00 on 1 January 2000."""

SECS_PER_DAY = 86400
SECS_PER_HOUR = 3600
SECS_PER_MINUTE = 60

RTC_SUNDAY = 0x07

_UINT32_MASK = 0xFFFFFFFF

MONTH_NAMES = (
    "---",
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass
class RtcInfo:
    """A calendar date and time as an RTC holds it.

    ``year`` counts from 2000 (so 19 means 2019); ``month`` and ``day`` start
    at 1. The weekday is not calculated and defaults to Sunday.
    """

    year: int = 0
    month: int = 1
    day: int = 1
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    weekday: int = RTC_SUNDAY

    def same_moment(self, other: RtcInfo) -> bool:
        """Compare every field except the weekday."""
        return (
            self.year, self.month, self.day, self.hours, self.minutes, self.seconds
        ) == (
            other.year, other.month, other.day, other.hours, other.minutes, other.seconds
        )


def _is_leap(year: int) -> bool:
    return year % 4 == 0


def _days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (1-12) of ``year`` (counted from 2000)."""
    if month == 2 and _is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def ntp_to_datetime(ntp_time: int) -> RtcInfo:
    """Convert whole NTP seconds into a date and time.

    Raises ValueError when the time is not a 32-bit value or lies before
    1 January 2000.
    """
    if not 0 <= ntp_time <= _UINT32_MASK:
        raise ValueError(f"NTP time {ntp_time} is not a 32-bit unsigned value")
    if ntp_time < EPOCH_2000:
        raise ValueError(f"NTP time {ntp_time} is before 1 January 2000")

    remainder = ntp_time - EPOCH_2000

    year = 0
    while remainder >= (secs := (366 if _is_leap(year) else 365) * SECS_PER_DAY):
        remainder -= secs
        year += 1

    month = 1
    for month in range(1, 13):
        secs = _days_in_month(month, year) * SECS_PER_DAY
        if remainder < secs:
            break
        remainder -= secs

    days, remainder = divmod(remainder, SECS_PER_DAY)
    hours, remainder = divmod(remainder, SECS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECS_PER_MINUTE)

    return RtcInfo(
        year=year,
        month=month,
        day=days + 1,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def datetime_to_ntp(rtc: RtcInfo) -> int:
    """Convert a date and time into whole NTP seconds (wrapping at 32 bits)."""
    year = rtc.year
    total = EPOCH_2000 + year * 365 * SECS_PER_DAY

    if year > 0:
        # 2000 itself was a leap year, then every fourth year after it.
        total += SECS_PER_DAY
        total += ((year - 1) // 4) * SECS_PER_DAY

    # December never adds a whole month, so at most eleven months count.
    full_months = max(0, min(rtc.month - 1, 11))
    total += sum(_days_in_month(m, year) for m in range(1, full_months + 1)) * SECS_PER_DAY

    total += (rtc.day - 1) * SECS_PER_DAY
    total += rtc.hours * SECS_PER_HOUR
    total += rtc.minutes * SECS_PER_MINUTE
    total += rtc.seconds

    return total & _UINT32_MASK


def format_datetime(rtc: RtcInfo) -> str:
    """Render as ``HH:MM:SS DD Mon 20YY``."""
    if not 0 <= rtc.month < len(MONTH_NAMES):
        raise ValueError(f"month {rtc.month} is out of range")
    return (
        f"{rtc.hours:02d}:{rtc.minutes:02d}:{rtc.seconds:02d} "
        f"{rtc.day:02d} {MONTH_NAMES[rtc.month]} 20{rtc.year:02d}"
    )