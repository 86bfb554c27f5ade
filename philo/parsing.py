"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from dataclasses import dataclass

INT_MAX = 2**31 - 1
MIN_DURATION_US = 60_000
USAGE = "wrong input:\n ./philo 5 800 200 200 [5]"

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"


class ParseError(ValueError):
    """Raised when a command-line value is not acceptable."""


@dataclass(frozen=True)
class Config:
    """Simulation settings; durations are in microseconds."""

    philo_nbr: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    nbr_limit_meals: int = -1


def parse_number(text: str) -> int:
    """Parse a non-negative integer no larger than INT_MAX.

    Leading whitespace and a single '+' are accepted; parsing stops at the
    first character that is not a digit.
    """
    rest = text.lstrip(_SPACES)
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        raise ParseError("valeurs négatives interdites")
    if not rest or rest[0] not in _DIGITS:
        raise ParseError("les valeurs doivent être des chiffres")
    if len(rest) > 10:
        raise ParseError("la limite est INT_MAX")
    digits = "".join(itertools.takewhile(lambda c: c in _DIGITS, rest))
    value = int(digits)
    if value > INT_MAX:
        raise ParseError("la limite est INT_MAX")
    return value


def parse_input(args: Sequence[str]) -> Config:
    """Build a Config from the arguments that follow the program name."""
    args = list(args)
    if len(args) not in (4, 5):
        raise ParseError(USAGE)
    philo_nbr = parse_number(args[0])
    time_to_die = parse_number(args[1]) * 1000
    time_to_eat = parse_number(args[2]) * 1000
    time_to_sleep = parse_number(args[3]) * 1000
    if min(time_to_die, time_to_eat, time_to_sleep) < MIN_DURATION_US:
        raise ParseError("les valeurs doivent dépasser 60ms")
    limit = parse_number(args[4]) if len(args) == 5 else -1
    return Config(
        philo_nbr=philo_nbr,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        nbr_limit_meals=limit,
    )