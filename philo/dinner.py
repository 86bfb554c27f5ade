"""The dinner itself: philosopher threads and the monitor that watches them."""

from __future__ import annotations

import threading
import time

from philo.status import Status, StatusWriter
from philo.table import Philosopher, Table, now_ms

_POLL_SECONDS = 0.0005
_DESYNC_US = 30_000
_THINK_RATIO = 0.42


def thinking_time(time_to_eat: float, time_to_sleep: float, philo_nbr: int) -> float:
    """Microseconds a philosopher spends thinking after sleeping.

    Only an odd number of philosophers needs to think; an even table
    alternates naturally.
    """
    if philo_nbr % 2 == 0:
        return 0
    t_think = time_to_eat * 2 - time_to_sleep
    if t_think <= 0:
        return 0
    return t_think * _THINK_RATIO


class Dinner:
    """Runs the philosopher threads and the monitor for one table."""

    def __init__(self, table: Table, writer: StatusWriter) -> None:
        self.table = table
        self.writer = writer

    def think(self, philo: Philosopher, pre_simulation: bool = False) -> None:
        """Announce thinking (unless before the start) and pause if needed."""
        if not pre_simulation:
            self.writer.write(Status.THINKING, philo)
        pause = thinking_time(
            self.table.time_to_eat, self.table.time_to_sleep, self.table.philo_nbr
        )
        if pause > 0:
            self.table.precise_sleep(pause)

    def philo_died(self, philo: Philosopher) -> bool:
        """Report and return whether the philosopher has starved."""
        if philo.is_full():
            return False
        if philo.time_since_meal() >= self.table.time_to_die // 1000:
            self.writer.write(Status.DIED, philo)
            return True
        return False

    def run(self) -> None:
        """Run the whole simulation and return once every thread has stopped."""
        table = self.table
        if table.nbr_limit_meals == 0:
            return
        if table.philo_nbr == 1:
            workers = [threading.Thread(target=self._lone, args=(table.philos[0],))]
        else:
            workers = [
                threading.Thread(target=self._dine, args=(philo,))
                for philo in table.philos
            ]
        for worker in workers:
            worker.start()
        monitor = threading.Thread(target=self._monitor)
        monitor.start()
        table.mark_ready()
        for worker in workers:
            worker.join()
        table.finish()
        monitor.join()

    @staticmethod
    def _reset_meal_clock(philo: Philosopher) -> None:
        with philo.lock:
            philo.last_meal_time = now_ms()

    def _lone(self, philo: Philosopher) -> None:
        self._reset_meal_clock(philo)
        self.table.register_running()
        self.table.start_simulation = now_ms()
        self.writer.write(Status.TAKE_FIRST_FORK, philo)
        while not self.table.finished():
            time.sleep(0.001)

    def _desynchronise(self, philo: Philosopher) -> None:
        if self.table.philo_nbr % 2 == 0:
            if philo.id % 2 == 0:
                self.table.precise_sleep(_DESYNC_US)
        elif philo.id % 2:
            self.think(philo, True)

    def _eat(self, philo: Philosopher) -> None:
        table = self.table
        with philo.first_fork:
            self.writer.write(Status.TAKE_FIRST_FORK, philo)
            with philo.second_fork:
                self.writer.write(Status.TAKE_SECOND_FORK, philo)
                count = philo.record_meal()
                self.writer.write(Status.EATING, philo)
                table.precise_sleep(table.time_to_eat)
                if table.nbr_limit_meals > 0 and count == table.nbr_limit_meals:
                    philo.set_full()

    def _dine(self, philo: Philosopher) -> None:
        table = self.table
        table.wait_until_ready()
        self._reset_meal_clock(philo)
        table.register_running()
        self._desynchronise(philo)
        while not table.all_running():
            time.sleep(_POLL_SECONDS)
        while not table.finished():
            if philo.is_full():
                break
            self._eat(philo)
            self.writer.write(Status.SLEEPING, philo)
            table.precise_sleep(table.time_to_sleep)
            self.think(philo, False)

    def _monitor(self) -> None:
        table = self.table
        while not table.all_running() and not table.finished():
            time.sleep(_POLL_SECONDS)
        while not table.finished():
            for philo in table.philos:
                if table.finished():
                    break
                if self.philo_died(philo):
                    table.finish()
                    self.writer.write(Status.DIED, philo)
            time.sleep(_POLL_SECONDS)