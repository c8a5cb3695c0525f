"""Threads, forks and the death monitor of the dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from itertools import cycle
from typing import List, Optional, TextIO

from dining.parsing import Settings
from dining.timing import precise_sleep, timestamp_ms

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"

_FORK_POLL_S = 0.001


@dataclass(eq=False)
class Philosopher:
    """One seat at the table: its own fork and a reference to the neighbour's."""

    id: int
    own_fork: threading.Lock = field(default_factory=threading.Lock)
    neighbor_fork: Optional[threading.Lock] = None
    last_meal: int = field(default_factory=timestamp_ms)


class Simulation:
    """Shared state of one run and the actions the philosophers perform."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self._out = out if out is not None else sys.stdout
        self.start_time = timestamp_ms()
        self.stopped = False
        self.meals_completed = 0
        self._print_lock = threading.Lock()
        self._time_lock = threading.Lock()
        self.philosophers: List[Philosopher] = [
            Philosopher(id=number)
            for number in range(1, settings.number_of_philosophers + 1)
        ]
        # Each philosopher's second fork is the next one's own, around the table.
        for philosopher, neighbor in zip(
            self.philosophers, self.philosophers[1:] + self.philosophers[:1]
        ):
            philosopher.neighbor_fork = neighbor.own_fork

    def print_message(self, message: str, philosopher: Philosopher) -> None:
        """Write a timestamped status line unless the simulation has stopped.

        Meals are counted here when a meal limit is set.
        """
        elapsed = timestamp_ms() - self.start_time
        with self._print_lock:
            if self.stopped:
                return
            if message == EATING and self.settings.must_eat is not None:
                self.meals_completed += 1
            print(f"{elapsed} {philosopher.id} {message}", file=self._out)

    def should_stop(self) -> bool:
        """Return True once the simulation is over, ending it if enough meals were eaten."""
        must_eat = self.settings.must_eat
        with self._print_lock:
            if (
                must_eat is not None
                and self.meals_completed
                > must_eat * self.settings.number_of_philosophers
            ):
                self.stopped = True
            return self.stopped

    def check_death(self, philosopher: Philosopher) -> bool:
        """Return True if the simulation is over, announcing a starved philosopher."""
        now = timestamp_ms()
        elapsed = now - self.start_time
        with self._time_lock:
            lived = timestamp_ms() - philosopher.last_meal
        with self._print_lock:
            if self.stopped:
                return True
            if lived > self.settings.time_to_die:
                self.stopped = True
                print(f"{elapsed} {philosopher.id} {DIED}", file=self._out)
                return True
        return False

    def monitor(self) -> bool:
        """Watch every philosopher in turn until the simulation ends."""
        for philosopher in cycle(self.philosophers):
            if self.check_death(philosopher):
                return True
            threading.Event().wait(0)
        return False

    def _acquire(self, lock: threading.Lock) -> bool:
        while not lock.acquire(timeout=_FORK_POLL_S):
            if self.should_stop():
                return False
        return True

    def take_forks(self, philosopher: Philosopher) -> bool:
        """Pick up the own fork, then the neighbour's.

        Returns False, holding no fork, if the simulation ends while waiting.
        """
        if not self._acquire(philosopher.own_fork):
            return False
        self.print_message(TAKEN_FORK, philosopher)
        if not self._acquire(philosopher.neighbor_fork):
            philosopher.own_fork.release()
            return False
        self.print_message(TAKEN_FORK, philosopher)
        return True

    def eat(self, philosopher: Philosopher) -> None:
        """Announce the meal and spend ``time_to_eat`` on it."""
        self.print_message(EATING, philosopher)
        precise_sleep(self.settings.time_to_eat)

    def put_down_forks(self, philosopher: Philosopher) -> None:
        """Release both forks."""
        philosopher.neighbor_fork.release()
        philosopher.own_fork.release()

    def sleep(self, philosopher: Philosopher) -> None:
        """Announce sleep and spend ``time_to_sleep`` on it."""
        self.print_message(SLEEPING, philosopher)
        precise_sleep(self.settings.time_to_sleep)

    def think(self, philosopher: Philosopher) -> None:
        """Announce thinking."""
        self.print_message(THINKING, philosopher)

    def routine(self, philosopher: Philosopher) -> None:
        """Life cycle of one philosopher, run in its own thread.

        Even-numbered philosophers, and the last one when not alone, start by
        thinking for half a meal so that neighbours do not grab forks together.
        """
        count = self.settings.number_of_philosophers
        if philosopher.id % 2 == 0 or (philosopher.id == count and count != 1):
            self.think(philosopher)
            precise_sleep(self.settings.time_to_eat // 2)
        while not self.should_stop():
            if not self.take_forks(philosopher):
                break
            with self._time_lock:
                philosopher.last_meal = timestamp_ms()
            self.eat(philosopher)
            self.put_down_forks(philosopher)
            self.sleep(philosopher)
            self.think(philosopher)

    def run(self) -> None:
        """Start a thread per philosopher, monitor them, then wait for all to finish."""
        threads = [
            threading.Thread(target=self.routine, args=(philosopher,))
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        self.monitor()
        for thread in threads:
            thread.join()