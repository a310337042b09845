# fieldkit

Helpers for firmware-style bookkeeping, usable on a desktop or in tests.
Pure Python, no dependencies.

## Modules

- **`fieldkit.ntp`**: NTP seconds and calendar dates.
  - `ntp_to_datetime(ntp_time)` turns whole NTP seconds into an `RtcInfo`
    (`year` counted from 2000, `month`, `day`, `hours`, `minutes`, `seconds`).
    It raises `ValueError` for values outside 32 bits or before 1 January 2000.
  - `datetime_to_ntp(rtc)` goes the other way and wraps at 32 bits.
  - `format_datetime(rtc)` renders `HH:MM:SS DD Mon 20YY`.
  - `RtcInfo.same_moment(other)` compares everything except the weekday.
- **`fieldkit.strings`**: strict string handling.
  - `strict_atoi(text)` accepts decimal digits only. The value wraps at
    32 bits. It raises `ValueError` for an empty string, for a non-digit, or
    when the result is the reserved value `0xFFFFFFFF`.
  - `safe_copy(src, n)` keeps at most `n - 1` characters, as a buffer of `n`
    with a terminator would, and stops at a NUL.
  - `collapse_repeats(text)` drops a character that repeats the one before
    it, so `"pebbles"` becomes `"pebles"`.
  - `remove_quotes(text)` skips the first character and returns the text up
    to the next double quote. It raises `ValueError` if that text is empty.
- **`fieldkit.version`**: `Version(major, minor, build)`.
  - `pack()` lays it out little-endian in one 32-bit word, and
    `Version.unpack(value)` reads it back.
  - Versions order by their packed value.
- **`fieldkit.spinbox`**: editing controls.
  - `Spinbox` is a bounded 8-bit value. `inc()` and `dec()` step it and wrap
    at `lo` and `hi`.
  - `TimeSpinbox` is a 12-hour clock with an `is_am` flag. `inc_minute()` and
    `dec_minute()` move in quarter hours and carry into the hour.
    `inc_hour()` flips am/pm when the hour reaches 12, and `dec_hour()` flips
    it when the hour reaches 11.
  - `set_from_24h(hour, minute)` shows a 24-hour time.
  - `refresh_value()` pushes the displayed time into the controls.
- **`fieldkit.atparser`**: field extraction from modem AT responses.
  - `parse_text_fields(text, header, field_types)` matches an optional header
    and splits the rest at commas. It skips leading spaces and converts each
    field by its `FieldType` (`NUMBER` or `STRING`). Fields are cut at 63
    characters. A short result is logged as a warning.
  - `parse_number(text)` reads an optional minus sign and leading digits as a
    signed 32-bit value.
- **`fieldkit.sara`**: response handling for a cellular modem with GNSS.
  - `lookup_response(text, table)` maps a line to a `CellResponseCode` by
    prefix, using `RESPONSE_TABLE` or `UBLOX_RESPONSE_TABLE`. It returns
    `UNKNOWN` when nothing matches.
  - `FwVersionQuery.handle(code, response)` and
    `GnssStatusQuery.handle(code, response)` consume one line each and return
    an `AtCommandResult` (`DONE`, `ERROR`, `CONTINUE`, ...). The parsed
    firmware version and `GnssStatus` stay on the query object.
- **`fieldkit.puzzle`**: a brute-force search for digits with
  `xyz + ywy = zyzw`.
  - `iter_attempts()` yields each `Attempt` in search order.
  - `solve_addition()` returns the first non-trivial solution.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from fieldkit.ntp import ntp_to_datetime, datetime_to_ntp, format_datetime

rtc = ntp_to_datetime(3761917500)
print(format_datetime(rtc))          # 17:05:00 18 Mar 2019
assert datetime_to_ntp(rtc) == 3761917500
```

```python
from fieldkit.strings import strict_atoi, safe_copy, collapse_repeats

strict_atoi("3423")            # 3423
safe_copy("Helloworld", 10)    # "Helloworl"
collapse_repeats("pebbles")    # "pebles"
```

```python
from fieldkit.atparser import FieldType, parse_text_fields

parse_text_fields("+UGPS: 1,0,1", "+UGPS:", [FieldType.NUMBER] * 3)  # [1, 0, 1]
```

## Commands

`fieldkit-puzzle` prints every attempt of the addition search as a table
row, stopping at the first non-trivial solution:

```
fieldkit-puzzle
```

`fieldkit-sara` feeds two sample responses through the firmware-version and
GNSS-status handlers and prints the parsed fields:

```
fieldkit-sara
```

## What it does not do

- It does not talk to a modem. The handlers work on response lines you pass
  in, and there is no serial port or command sending.
- There are no schedule-editing rules on top of `TimeSpinbox`. It has no
  notion of a period's start and end time, and no day blocks.