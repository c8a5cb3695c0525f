"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

INT_MAX = 2_147_483_647

USAGE = (
    "input example: [number_of_philosophers] [time_to_die] "
    "[time_to_eat] [time_to_sleep] "
    "[optional: number_of_times_each_philosopher_must_eat]\n"
)
ERR_ARGS = "error: invalid number of arguments.\n"
ERR_PHILOS = "error: too many philosophers (> 200).\n"
ERR_NUM = (
    "error: arguments must contain only numeric digits (0–9) "
    "and represent positive values.\n"
)
ERR_NUM_MAX = "error: argument too large. maximum allowed is 2,147,483,647.\n"

_LEADING_NUMBER = re.compile(r"[ \t\n\r\f\v]*\+?([0-9]*)")
_DIGITS_ONLY = re.compile(r"[0-9]+")


class InputError(ValueError):
    """Raised when the command-line arguments are not acceptable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.usage = USAGE


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run, all times in milliseconds."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: Optional[int] = None


def parse_number(text: str) -> int:
    """Read the leading decimal number of ``text``.

    Leading whitespace and a single ``+`` are skipped; reading stops at the
    first non-digit. A string without leading digits yields 0.
    """
    digits = _LEADING_NUMBER.match(text).group(1)
    return int(digits) if digits else 0


def is_digit_string(text: str) -> bool:
    """Return True if ``text`` is non-empty and made only of ASCII digits."""
    return _DIGITS_ONLY.fullmatch(text) is not None


def parse_input(args: Sequence[str]) -> Settings:
    """Validate the arguments (program name excluded) and build settings.

    Four or five arguments are expected, each a plain digit string whose
    value fits in a signed 32-bit integer. Raises :class:`InputError`.
    """
    if not 4 <= len(args) <= 5:
        raise InputError(ERR_ARGS)
    values = []
    for arg in args:
        if not is_digit_string(arg):
            raise InputError(ERR_NUM)
        value = parse_number(arg)
        if value > INT_MAX:
            raise InputError(ERR_NUM_MAX)
        values.append(value)
    philosophers, to_die, to_eat, to_sleep, *rest = values
    return Settings(
        number_of_philosophers=philosophers,
        time_to_die=to_die,
        time_to_eat=to_eat,
        time_to_sleep=to_sleep,
        must_eat=rest[0] if rest else None,
    )