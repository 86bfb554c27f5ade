# philo

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. In a loop it takes two forks, eats, sleeps and thinks. A monitor
thread ends the simulation as soon as one philosopher has gone without a meal
for too long. When a meal limit is given, each philosopher stops once it has
eaten that many times. The simulation ends when every philosopher has stopped.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

All times are in milliseconds. Each time must be at least 60 ms. Every value
must be a non-negative integer no larger than 2147483647. Leading whitespace
and a single `+` are accepted. A `MEALS` of `0` ends the simulation before
anyone sits down.

Example:

```
philo 5 800 200 200 5
```

Each event is printed on its own line, in colour. A line starts with the
milliseconds elapsed since the start, followed by the philosopher's number and
the event. The event texts are in French:

- `a pris la fourchette N`: took fork N
- `mange pour la N fois`: is eating, for the N-th time
- `dort`: is sleeping
- `pense`: is thinking
- `est mort`: has died

When the simulation ends, `simulation terminer` is printed. When the arguments
are invalid, an error message is printed and the command exits with status 1.

## Library use

```python
from philo.parsing import parse_input
from philo.table import Table
from philo.status import StatusWriter
from philo.dinner import Dinner

config = parse_input(["4", "410", "200", "200", "3"])
table = Table(config)
Dinner(table, StatusWriter(table)).run()
```

- `philo.parsing`: `parse_number` and `parse_input` validate the arguments.
  They raise `ParseError` on bad input. `parse_input` returns a `Config`,
  which holds its durations in microseconds.
- `philo.table`: `Table` holds the forks, the `Philosopher` objects and the
  flags shared by the threads. `assign_forks` decides the order in which each
  philosopher picks up its forks.
- `philo.status`: `format_status` builds one status line. `StatusWriter`
  writes the lines to a stream, which is standard output by default. Pass
  `debug=False` for the shorter messages, which have no fork numbers and no
  meal counts.
- `philo.dinner`: `Dinner.run` starts the threads and returns once all of
  them have stopped. `thinking_time` gives the thinking pause of a
  philosopher at a table with an odd number of seats.

## Running the tests

```
pip install .[test]
pytest
```