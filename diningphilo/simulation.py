"""Threaded dining philosophers simulation."""

from __future__ import annotations

import itertools
import sys
import threading
import time
from typing import TextIO

from diningphilo.arguments import Settings
from diningphilo.timing import now_ms, sleep_ms

_EVEN_START_DELAY = 0.0001
_AFTER_SLEEP_DELAY = 0.001
_MONITOR_YIELD = 0.0001


class Philosopher:
    """One diner that alternates between thinking, eating and sleeping."""

    def __init__(
        self,
        table: Table,
        ident: int,
        left_fork: threading.Lock | None,
        right_fork: threading.Lock,
    ) -> None:
        self.table = table
        self.ident = ident
        self.left_fork = left_fork
        self.right_fork = right_fork
        self._last_meal = 0
        self._meals = 0

    def last_meal(self) -> int:
        """Timestamp in milliseconds of the last meal start, or 0 if none yet."""
        with self.table.time_lock:
            return self._last_meal

    def meals(self) -> int:
        """Number of meals finished so far."""
        with self.table.counter_lock:
            return self._meals

    def eat(self) -> None:
        """Think, pick up both forks, eat, then put the forks down."""
        table = self.table
        table.announce(self, "is thinking")
        if self.left_fork is None:
            raise RuntimeError("a philosopher needs two forks to eat")
        if self.ident % 2:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork
        with first:
            table.announce(self, "has taken a fork")
            with second:
                table.announce(self, "has taken a fork")
                with table.time_lock:
                    self._last_meal = now_ms()
                table.announce(self, "is eating")
                sleep_ms(table.settings.time_to_eat)
                with table.counter_lock:
                    self._meals += 1

    def run(self) -> None:
        """Live until the table stops the simulation."""
        table = self.table
        settings = table.settings
        if self.ident % 2 == 0:
            time.sleep(_EVEN_START_DELAY)
        while table.running():
            if settings.number_of_philosophers == 1:
                with self.right_fork:
                    table.announce(self, "has taken a fork")
                sleep_ms(settings.time_to_die)
                table.announce(self, "dead")
                return
            self.eat()
            table.announce(self, "is sleeping")
            sleep_ms(settings.time_to_sleep)
            time.sleep(_AFTER_SLEEP_DELAY)


class Table:
    """Shared state of one simulation: forks, philosophers and the stop flag."""

    def __init__(self, settings: Settings, output: TextIO | None = None) -> None:
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        self.print_lock = threading.Lock()
        self.time_lock = threading.Lock()
        self.counter_lock = threading.Lock()
        self._flag_lock = threading.Lock()
        self._running = True
        self.start = now_ms()
        count = settings.number_of_philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                self,
                index + 1,
                self.forks[(index + 1) % count] if count > 1 else None,
                fork,
            )
            for index, fork in enumerate(self.forks)
        ]

    def running(self) -> bool:
        """Whether the simulation is still going."""
        with self._flag_lock:
            return self._running

    def stop(self) -> None:
        """End the simulation; later announcements are suppressed."""
        with self._flag_lock:
            self._running = False

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Write a timestamped status line while the simulation is running."""
        with self.print_lock:
            elapsed = now_ms() - self.start
            if self.running():
                self.output.write(f"{elapsed} {philosopher.ident} {message}\n")

    def all_fed(self) -> bool:
        """Whether every philosopher has eaten the required number of meals."""
        required = self.settings.meals
        if not required:
            return False
        return all(p.meals() >= required for p in self.philosophers)

    def monitor(self) -> None:
        """Watch for starvation or completion and stop the simulation."""
        if self.settings.number_of_philosophers <= 1:
            return
        for philosopher in itertools.cycle(self.philosophers):
            last = philosopher.last_meal()
            if last and now_ms() - last > self.settings.time_to_die:
                self.announce(philosopher, "dead")
                self.stop()
                return
            if self.all_fed():
                self.stop()
                return
            time.sleep(_MONITOR_YIELD)

    def run(self) -> None:
        """Start every philosopher and the monitor, then wait for them all."""
        threads = [
            threading.Thread(target=p.run, name=f"philosopher-{p.ident}")
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        watcher = threading.Thread(target=self.monitor, name="monitor")
        watcher.start()
        watcher.join()
        for thread in threads:
            thread.join()


def run_simulation(settings: Settings, output: TextIO | None = None) -> Table:
    """Run a full simulation and return the finished table."""
    table = Table(settings, output)
    table.run()
    return table