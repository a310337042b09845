"""Field extraction from the text of AT command responses."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

logger = logging.getLogger(__name__)

FIELD_LEN = 64
"""Buffer size for one field, terminator included; fields keep at most 63 chars."""

_UINT32_MASK = 0xFFFFFFFF


class FieldType(Enum):
    """How a parsed field is to be returned."""

    NUMBER = "number"
    STRING = "string"


class _State(Enum):
    HEADER = "header"
    FIND = "find"
    GET = "get"


def _to_int32(value: int) -> int:
    return ((value + 0x80000000) & _UINT32_MASK) - 0x80000000


def parse_number(text: str) -> int:
    """Read an optional minus sign and the decimal digits that follow it.

    Parsing stops at the first non-digit; no digits gives 0. The result
    wraps as a signed 32-bit value.
    """
    negative = text.startswith("-")
    total = 0
    for char in text[1:] if negative else text:
        if not "0" <= char <= "9":
            break
        total = _to_int32(10 * total + ord(char) - ord("0"))
    return _to_int32(-total) if negative else total


def _convert(field_type: FieldType, chars: list[str]) -> int | str:
    text = "".join(chars)
    if field_type is FieldType.NUMBER:
        # Numeric fields are stored unsigned, so negatives wrap.
        return parse_number(text) & _UINT32_MASK
    return text


def parse_text_fields(
    text: str, header: str | None, field_types: Iterable[FieldType]
) -> list[int | str]:
    """Extract comma-separated fields from a response line.

    When ``header`` is given, its characters are matched in order first and
    fields start after the last of them. Leading spaces of a field are
    skipped. At most one value per entry in ``field_types`` is returned, each
    converted as its type says. A field longer than ``FIELD_LEN - 1``
    characters is cut short and ends the parse.
    """
    types = list(field_types)
    text = text.split("\0", 1)[0]
    values: list[int | str] = []
    state = _State.HEADER if header else _State.FIND
    header_pos = 0
    buffer: list[str] = []

    for char in text + "\0":
        if len(values) >= len(types):
            break

        if state is _State.HEADER:
            if header_pos < len(header):
                if char == header[header_pos]:
                    header_pos += 1
                continue
            # Header complete: this same character may begin the first field.
            state = _State.FIND

        if state is _State.FIND:
            if char != " ":
                buffer = [char]
                state = _State.GET
            continue

        if char not in ",\0":
            if len(buffer) < FIELD_LEN - 1:
                buffer.append(char)
            else:
                values.append(_convert(types[len(values)], buffer))
                break
        else:
            values.append(_convert(types[len(values)], buffer))
            state = _State.FIND

    if len(values) != len(types):
        logger.warning(
            "fields parsed = %d (expected %d)", len(values), len(types)
        )
    return values