"""Command-line argument validation and simulation settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

INT_MAX = 2147483647


class ArgumentError(ValueError):
    """Raised when the simulation arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one dining-philosophers run, times in milliseconds."""

    num_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: Optional[int] = None
    time_to_think: int = 0


def is_valid_number(text: Optional[str]) -> bool:
    """Return True if ``text`` is an optionally '+'-prefixed decimal within int range."""
    if not text:
        return False
    digits = text[1:] if text.startswith("+") else text
    if not digits or digits.startswith("-"):
        return False
    if not all("0" <= ch <= "9" for ch in digits):
        return False
    return int(digits) <= INT_MAX


def think_time(num_philosophers: int, time_to_eat: int, time_to_sleep: int) -> int:
    """Extra thinking time that keeps an odd table from starving a philosopher."""
    if num_philosophers % 2 == 0:
        return 0
    if time_to_eat > time_to_sleep:
        return time_to_eat
    if time_to_eat == time_to_sleep:
        return time_to_eat // 2
    return 0


def _to_positive_int(text: str) -> int:
    if not is_valid_number(text):
        raise ArgumentError(f"invalid number: {text!r}")
    # A leading '+' passes the syntax check but never converts to a positive value.
    if text.startswith("+"):
        raise ArgumentError(f"non-positive number: {text!r}")
    value = int(text)
    if value <= 0:
        raise ArgumentError(f"non-positive number: {text!r}")
    return value


def parse_args(args: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name."""
    if len(args) not in (4, 5):
        raise ArgumentError("expected 4 or 5 arguments")
    values = [_to_positive_int(arg) for arg in args]
    count, die, eat, sleep = values[:4]
    max_meals = values[4] if len(values) == 5 else None
    return Settings(
        num_philosophers=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        max_meals=max_meals,
        time_to_think=think_time(count, eat, sleep),
    )