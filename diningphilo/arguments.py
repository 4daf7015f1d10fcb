"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """Raised when the simulation arguments are malformed."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None


def parse_number(text: str) -> int:
    """Parse a strictly positive decimal integer that fits in a signed 32-bit int.

    Leading zeros are allowed; signs, whitespace and any other characters are not.
    """
    stripped = text.lstrip("0") or text
    if not stripped or not set(stripped) <= _DIGITS:
        raise ArgumentError(f"not a positive number: {text!r}")
    value = int(stripped)
    if value == 0:
        raise ArgumentError(f"number must be positive: {text!r}")
    if value > _INT_MAX:
        raise ArgumentError(f"number too large: {text!r}")
    return value


def parse_arguments(args: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Expects number_of_philosophers, time_to_die, time_to_eat, time_to_sleep and
    optionally the number of meals each philosopher must eat.
    """
    values = [parse_number(arg) for arg in args]
    if len(values) not in (4, 5):
        raise ArgumentError(f"expected 4 or 5 arguments, got {len(values)}")
    count, die, eat, sleep, *rest = values
    return Settings(
        number_of_philosophers=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        meals=rest[0] if rest else None,
    )