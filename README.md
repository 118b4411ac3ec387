# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and sits at a round table with one fork between each pair of
neighbours. A philosopher needs both adjacent forks to eat, then sleeps,
then thinks. While the philosophers run, the calling thread watches the
table and stops the simulation as soon as a philosopher starves, or, when a
meal count is given, once every philosopher has eaten enough.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

All times are in milliseconds. Every argument must be a positive whole
number written with digits only, no larger than 2147483647. Signs are not
accepted. If the arguments are invalid, or there are not four or five of
them, the program prints `Error: Invalid argument` and exits with status 1.

Example: five philosophers who die after 800 ms without food, eat for
200 ms, sleep for 200 ms, and stop after each has eaten 7 times:

```
philo 5 800 200 200 7
```

Each event is printed as one line: the milliseconds elapsed since the start,
the philosopher's number (from 1), and what happened:

```
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
...
810 3 died
```

The possible events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`.

With an odd number of philosophers, each one also waits after thinking: as
long as eating when eating takes longer than sleeping, or half as long as
eating when the two are equal. This keeps one philosopher from being
starved by its neighbours.

## Using it from Python

```python
import io

from philosophers.parsing import parse_args
from philosophers.simulation import run_simulation

settings = parse_args(["4", "410", "200", "200", "3"])
log = io.StringIO()
dead = run_simulation(settings, log)
print(log.getvalue())
print("died:", dead)
```

`parse_args` takes the arguments that follow the program name, raises
`ArgumentError` (a `ValueError`) for invalid input and returns a frozen
`Settings` dataclass; `max_meals` is `None` when no meal count is given.
`run_simulation` returns the number of the philosopher who died, or `None`
if the run ended because everyone had eaten enough. `Table` and
`Philosopher` in `philosophers.simulation` give finer control over a
single run.

## Running the tests

```
pip install .[test]
pytest
```