"""Shared state of the dinner: forks, philosophers and the table."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

from philo.parsing import Config


def now_ms() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def now_us() -> int:
    """Wall-clock time in microseconds."""
    return time.time_ns() // 1_000


def assign_forks(philo_id: int, pos: int, count: int) -> tuple[int, int]:
    """Return the (first, second) fork indexes for a philosopher.

    Even philosophers take their own fork first, odd ones their neighbour's.
    """
    neighbour = (pos + 1) % count
    if philo_id % 2 == 0:
        return pos, neighbour
    return neighbour, pos


@dataclass(eq=False)
class Fork:
    """A fork guarded by a lock; usable as a context manager."""

    fork_id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __enter__(self) -> Fork:
        self.lock.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self.lock.release()


@dataclass(eq=False)
class Philosopher:
    """A diner with its forks and meal bookkeeping."""

    id: int
    first_fork: Fork
    second_fork: Fork
    table: Table = field(repr=False)
    meals_counter: int = 0
    full: bool = False
    last_meal_time: int = field(default_factory=now_ms)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record_meal(self) -> int:
        """Reset the meal clock, count one more meal and return the count."""
        with self.lock:
            self.last_meal_time = now_ms()
            self.meals_counter += 1
            return self.meals_counter

    def time_since_meal(self) -> int:
        """Milliseconds since the last meal started."""
        with self.lock:
            last = self.last_meal_time
        return now_ms() - last

    def set_full(self) -> None:
        with self.lock:
            self.full = True

    def is_full(self) -> bool:
        with self.lock:
            return self.full


class Table:
    """The table: settings, forks, philosophers and simulation flags."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.philo_nbr = config.philo_nbr
        self.time_to_die = config.time_to_die
        self.time_to_eat = config.time_to_eat
        self.time_to_sleep = config.time_to_sleep
        self.nbr_limit_meals = config.nbr_limit_meals
        self.start_simulation = now_ms()
        self.threads_running = 0
        self.lock = threading.Lock()
        self.write_lock = threading.Lock()
        self._end = threading.Event()
        self._ready = threading.Event()
        self.forks = [Fork(i) for i in range(self.philo_nbr)]
        self.philos: list[Philosopher] = []
        for pos in range(self.philo_nbr):
            philo_id = pos + 1
            first, second = assign_forks(philo_id, pos, self.philo_nbr)
            self.philos.append(
                Philosopher(philo_id, self.forks[first], self.forks[second], self)
            )

    def finished(self) -> bool:
        return self._end.is_set()

    def finish(self) -> None:
        self._end.set()

    def mark_ready(self) -> None:
        """Record the start time and release every waiting thread."""
        self.start_simulation = now_ms()
        self._ready.set()

    def wait_until_ready(self) -> None:
        self._ready.wait()

    def register_running(self) -> int:
        """Count one more running thread and return the new total."""
        with self.lock:
            self.threads_running += 1
            return self.threads_running

    def all_running(self) -> bool:
        with self.lock:
            return self.threads_running == self.philo_nbr

    def elapsed_ms(self) -> int:
        """Milliseconds since the simulation started."""
        return now_ms() - self.start_simulation

    def precise_sleep(self, usec: float) -> None:
        """Sleep for usec microseconds, returning early once the dinner ends."""
        start = now_us()
        while (elapsed := now_us() - start) < usec:
            if self.finished():
                break
            remaining = usec - elapsed
            if remaining > 1000:
                time.sleep(remaining / 2 / 1_000_000)
            else:
                while now_us() - start < usec:
                    pass