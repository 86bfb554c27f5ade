"""Status messages printed while the dinner runs."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

from philo.table import Philosopher, Table

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"


class Status(enum.Enum):
    EATING = enum.auto()
    SLEEPING = enum.auto()
    THINKING = enum.auto()
    TAKE_FIRST_FORK = enum.auto()
    TAKE_SECOND_FORK = enum.auto()
    DIED = enum.auto()


def format_status(status: Status, philo: Philosopher, elapsed: int, debug: bool) -> str:
    """Return the line (without newline) describing a philosopher's status."""
    prefix = f"{YELLOW}{elapsed:<6d}{RESET}{philo.id}"
    if status in (Status.TAKE_FIRST_FORK, Status.TAKE_SECOND_FORK):
        if not debug:
            return f"{prefix} a pris une fourchette"
        fork = philo.first_fork if status is Status.TAKE_FIRST_FORK else philo.second_fork
        return f"{prefix} a pris la fourchette {fork.fork_id}"
    if status is Status.EATING:
        if debug:
            return (
                f"{prefix} {GREEN}{GREEN}mange{RESET}{RESET}"
                f" pour la {philo.meals_counter} fois"
            )
        return f"{prefix} {GREEN}mange{RESET}"
    if status is Status.SLEEPING:
        return f"{prefix} dort"
    if status is Status.THINKING:
        return f"{prefix} pense"
    return f"{prefix} est mort"


class StatusWriter:
    """Writes status lines for a table, serialised by the table's write lock."""

    def __init__(self, table: Table, stream: TextIO | None = None, debug: bool = True) -> None:
        self.table = table
        self.stream = stream if stream is not None else sys.stdout
        self.debug = debug

    def write(self, status: Status, philo: Philosopher) -> bool:
        """Write one line unless the philosopher is full or the dinner ended.

        Returns whether a line was written.
        """
        elapsed = self.table.elapsed_ms()
        if philo.full:
            return False
        with self.table.write_lock:
            if self.table.finished():
                return False
            self.stream.write(format_status(status, philo, elapsed, self.debug) + "\n")
            self.stream.flush()
            return True