"""Small string helpers: strict number parsing, bounded copy and cleanup."""

from __future__ import annotations

from itertools import groupby

_UINT32_MASK = 0xFFFFFFFF
_BAD_ATOI = 0xFFFFFFFF


def strict_atoi(text: str) -> int:
    """Parse a string made only of decimal digits into a 32-bit unsigned value.

    The value wraps at 32 bits. Raises ValueError for an empty string, any
    non-digit character, or a result equal to 0xFFFFFFFF, which is reserved
    to mean a bad number.
    """
    if not text:
        raise ValueError("empty string is not a number")
    num = 0
    for char in text:
        if not "0" <= char <= "9":
            raise ValueError(f"{text!r} contains a non-digit character {char!r}")
        num = (10 * num + ord(char) - ord("0")) & _UINT32_MASK
        if num == _BAD_ATOI:
            raise ValueError(f"{text!r} gives the reserved value 0xFFFFFFFF")
    return num


def safe_copy(src: str, n: int) -> str:
    """Return what fits in a buffer of ``n`` characters including the terminator.

    At most ``n - 1`` characters are kept, and copying stops at a NUL.
    """
    if n < 1:
        raise ValueError("buffer size must be at least 1")
    return src.split("\0", 1)[0][: n - 1]


def collapse_repeats(text: str) -> str:
    """Drop characters that repeat the one just before them."""
    return "".join(char for char, _ in groupby(text))


def remove_quotes(text: str) -> str:
    """Skip the first character and return the run of non-quote text after it.

    Raises ValueError when there is no such run.
    """
    if len(text) < 2:
        raise ValueError(f"{text!r} is too short to hold a quoted value")
    run = text[1:].split('"', 1)[0]
    if not run:
        raise ValueError(f"{text!r} holds no text after its opening character")
    return run