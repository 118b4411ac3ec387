"""The dining philosophers: a shared table, forks, philosophers and a monitor."""

from __future__ import annotations

import sys
import threading
import time
from typing import Optional, TextIO

from philosophers.parsing import Settings

_MONITOR_PAUSE = 0.0005


def current_millis() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


class Philosopher:
    """One seat at the table, running in its own thread."""

    def __init__(self, ident: int, table: "Table", left_fork: threading.Lock,
                 right_fork: threading.Lock) -> None:
        self.id = ident
        self.table = table
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.meals_eaten = 0
        self.last_meal_time = 0
        self.thread: Optional[threading.Thread] = None

    def _take_in_order(self, first: threading.Lock, second: threading.Lock) -> bool:
        table = self.table
        first.acquire()
        if table.stopped():
            first.release()
            return False
        table.print_status(self, "has taken a fork")
        second.acquire()
        if table.stopped():
            second.release()
            first.release()
            return False
        table.print_status(self, "has taken a fork")
        return True

    def take_forks(self) -> bool:
        """Pick up both forks; even seats start right, odd seats start left."""
        if self.id % 2 == 0:
            return self._take_in_order(self.right_fork, self.left_fork)
        return self._take_in_order(self.left_fork, self.right_fork)

    def put_forks(self) -> None:
        self.left_fork.release()
        self.right_fork.release()

    def eat(self) -> None:
        table = self.table
        if table.stopped():
            return
        with table.meal_lock:
            self.last_meal_time = current_millis()
            self.meals_eaten += 1
        if table.stopped():
            return
        table.print_status(self, "is eating")
        _sleep_ms(table.settings.time_to_eat)

    def sleep_and_think(self) -> None:
        table = self.table
        if table.stopped():
            return
        table.print_status(self, "is sleeping")
        _sleep_ms(table.settings.time_to_sleep)
        if table.stopped():
            return
        table.print_status(self, "is thinking")
        _sleep_ms(table.settings.time_to_think)

    def _life_loop(self) -> None:
        while not self.table.stopped():
            if self.take_forks():
                self.eat()
                self.put_forks()
            if self.table.stopped():
                break
            self.sleep_and_think()

    def live(self) -> None:
        """Thread body: eat, sleep and think until the table stops."""
        table = self.table
        with table.meal_lock:
            self.last_meal_time = current_millis()
        if self.id % 2 == 1:
            _sleep_ms(1)
        if table.settings.num_philosophers == 1:
            table.print_status(self, "has taken a fork")
            _sleep_ms(table.settings.time_to_die)
            return
        self._life_loop()


class Table:
    """Shared state: forks, locks, the stop flag and the output stream."""

    def __init__(self, settings: Settings, output: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        self.print_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self._stop = False
        self.start_time = current_millis()
        count = settings.num_philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(seat + 1, self, self.forks[seat], self.forks[(seat + 1) % count])
            for seat in range(count)
        ]

    def stopped(self) -> bool:
        with self.meal_lock:
            return self._stop

    def stop(self) -> None:
        with self.meal_lock:
            self._stop = True

    def print_status(self, philosopher: Philosopher, message: str) -> None:
        """Write one timestamped status line."""
        with self.print_lock:
            elapsed = current_millis() - self.start_time
            self.output.write(f"{elapsed} {philosopher.id} {message}\n")

    def all_full(self) -> bool:
        """True when a meal limit is set and every philosopher has reached it."""
        limit = self.settings.max_meals
        if limit is None:
            return False
        with self.meal_lock:
            return all(p.meals_eaten >= limit for p in self.philosophers)

    def monitor(self) -> Optional[int]:
        """Watch for starvation or satiety; return the id of the dead philosopher."""
        while True:
            for philosopher in self.philosophers:
                with self.meal_lock:
                    if current_millis() - philosopher.last_meal_time > self.settings.time_to_die:
                        self.print_status(philosopher, "died")
                        self._stop = True
                        return philosopher.id
            if self.all_full():
                self.stop()
                return None
            time.sleep(_MONITOR_PAUSE)

    def run(self) -> Optional[int]:
        """Run the simulation to its end; return the id of the philosopher who died."""
        self.start_time = current_millis()
        for philosopher in self.philosophers:
            with self.meal_lock:
                philosopher.last_meal_time = current_millis()
            philosopher.thread = threading.Thread(target=philosopher.live, daemon=True)
            philosopher.thread.start()
        dead = self.monitor()
        for philosopher in self.philosophers:
            philosopher.thread.join()
        return dead


def run_simulation(settings: Settings, output: Optional[TextIO] = None) -> Optional[int]:
    """Seat the philosophers and run until one dies or all are full."""
    return Table(settings, output).run()