"""Brute-force search for the digit puzzle xyz + ywy = zyzw."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass

HEADER = " w | x | y | z  =>    A  +   B  =  sum  cf.   C"
RULE = "-" * 47

_DIGITS = range(10)


@dataclass(frozen=True)
class Attempt:
    """One assignment of digits to w, x, y and z."""

    w: int
    x: int
    y: int
    z: int

    @property
    def a(self) -> int:
        return 100 * self.x + 10 * self.y + self.z

    @property
    def b(self) -> int:
        return 100 * self.y + 10 * self.w + self.y

    @property
    def c(self) -> int:
        return 1000 * self.z + 100 * self.y + 10 * self.z + self.w

    @property
    def total(self) -> int:
        return self.a + self.b

    @property
    def is_solution(self) -> bool:
        """True when A + B equals C and not every digit is zero."""
        return self.c == self.total and any((self.w, self.x, self.y, self.z))


def iter_attempts() -> Iterator[Attempt]:
    """Yield attempts in search order, ending with the first solution."""
    for y in _DIGITS:
        for z in _DIGITS:
            for w in _DIGITS:
                for x in _DIGITS:
                    attempt = Attempt(w=w, x=x, y=y, z=z)
                    yield attempt
                    if attempt.is_solution:
                        return


def solve_addition() -> Attempt:
    """Return the first solution; raise LookupError if there is none."""
    for attempt in iter_attempts():
        if attempt.is_solution:
            return attempt
    raise LookupError("the puzzle has no solution")


def _format_row(attempt: Attempt) -> str:
    return (
        f" {attempt.w} | {attempt.x} | {attempt.y} | {attempt.z}  =>  "
        f"{attempt.a:3d}  + {attempt.b:3d}  = {attempt.total:4d}  cf {attempt.c:4d}"
    )


def main(argv: list[str] | None = None) -> int:
    """Print every attempt of the search as a table."""
    parser = argparse.ArgumentParser(
        prog="fieldkit-puzzle",
        description="Search for digits with xyz + ywy = zyzw.",
    )
    parser.parse_args(argv)
    print(HEADER)
    print(RULE)
    for attempt in iter_attempts():
        print(_format_row(attempt))
    return 0