"""Numeric spinboxes and a 12-hour time spinbox built from two of them."""

from __future__ import annotations

from dataclasses import dataclass, field

_UINT8_MASK = 0xFF


@dataclass
class Spinbox:
    """A bounded 8-bit value that steps up and down and wraps at its limits."""

    lo: int = 0
    hi: int = 255
    step: int = 1
    value: int = 0
    focused: bool = False

    def inc(self) -> int:
        """Step up; wrap to ``lo`` past ``hi``. Return the new value."""
        value = (self.value + self.step) & _UINT8_MASK
        if value > self.hi:
            value = self.lo
        self.value = value
        return value

    def dec(self) -> int:
        """Step down; wrap to ``hi`` from ``lo``. Return the new value.

        A value less than one step above ``lo`` drops to ``lo``.
        """
        if self.value == self.lo:
            value = self.hi
        elif self.value < self.lo + self.step:
            value = self.lo
        else:
            value = self.value - self.step
        self.value = value
        return value


def _hour_box() -> Spinbox:
    return Spinbox(lo=1, hi=12, step=1, value=12)


def _minute_box() -> Spinbox:
    return Spinbox(lo=0, hi=45, step=15, value=0)


@dataclass
class TimeSpinbox:
    """A 12-hour clock editor with an am/pm flag and quarter-hour minutes.

    ``hour``, ``minute`` and ``is_am`` hold the displayed time; the two
    spinboxes are the controls behind it.
    """

    hour_box: Spinbox = field(default_factory=_hour_box)
    minute_box: Spinbox = field(default_factory=_minute_box)
    hour: int = 12
    minute: int = 0
    is_am: bool = True

    def inc_hour(self) -> None:
        """Step the hour up, flipping am/pm when it reaches 12."""
        self.hour = self.hour_box.inc()
        if self.hour == 12:
            self.is_am = not self.is_am

    def inc_minute(self) -> None:
        """Move to the next quarter hour, carrying into the hour past 45."""
        minute = self.minute
        if minute >= 45:
            self.inc_hour()
            minute = 0
        elif minute >= 30:
            minute = 45
        elif minute >= 15:
            minute = 30
        else:
            minute = 15
        self.minute_box.value = minute
        self.minute = minute

    def dec_hour(self) -> None:
        """Step the hour down, flipping am/pm when it reaches 11."""
        self.hour = self.hour_box.dec()
        if self.hour == 11:
            self.is_am = not self.is_am

    def dec_minute(self) -> None:
        """Move to the previous quarter hour, borrowing from the hour at 0."""
        minute = self.minute
        if minute > 45:
            minute = 45
        elif minute > 30:
            minute = 30
        elif minute > 15:
            minute = 15
        elif minute > 0:
            minute = 0
        else:
            self.dec_hour()
            minute = 45
        self.minute_box.value = minute
        self.minute = minute

    def refresh_value(self) -> None:
        """Push the displayed time into the spinbox controls."""
        self.hour_box.value = self.hour
        self.minute_box.value = self.minute

    def set_from_24h(self, hour: int, minute: int) -> None:
        """Show a 24-hour time; hours up to 12 are shown as am."""
        if hour > 12:
            self.hour = hour % 12
            self.is_am = False
        else:
            self.hour = hour
            self.is_am = True
        self.minute = minute
        self.refresh_value()