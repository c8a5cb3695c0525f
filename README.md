# dining

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread, picks up its own fork and then its neighbour's, eats, puts the
forks down, sleeps and thinks, in that order, until one of them starves or
enough meals have been eaten. A monitor in the main thread watches every
philosopher in turn and announces the first one that has gone longer than
`time_to_die` without starting a meal.

## Installation

```
pip install .
```

## Usage

```
dining number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same entry point can be started with `python -m dining.cli`.

All times are in milliseconds. Every argument must be a plain, non-negative
whole number written with the digits 0–9 only, and no larger than
2,147,483,647.

Examples:

```
dining 5 800 200 200
dining 4 410 200 200 7
dining 1 800 200 200
```

The program writes one line for each event, as
`<milliseconds since start> <philosopher id> <action>`:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
0 2 is thinking
200 1 is sleeping
...
```

The actions are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Even-numbered philosophers, and the last one when
not alone, start by thinking for half of `time_to_eat` so that neighbours do
not reach for the same fork at once.

The run ends when a philosopher dies (its `died` line is the last one
printed), or, when the optional meal count is given, once the philosophers
together have eaten more than that count times the number of philosophers.
After that nothing more is printed and the program exits with status 0.

A wrong number of arguments, an argument that is not a digit string, or one
that is too large prints an error followed by a usage line on standard
output, and the program exits with status 1.

## Using it as a library

```python
import sys

from dining.parsing import parse_input
from dining.simulation import Simulation

settings = parse_input(["5", "800", "200", "200", "3"])
Simulation(settings, sys.stdout).run()
```

- `dining.parsing.parse_input(args)` takes the arguments without the program
  name and returns a frozen `Settings` dataclass (`must_eat` is `None` when
  no meal count is given). It raises `dining.parsing.InputError`, whose
  `message` and `usage` attributes hold the error text and the usage line.
- `dining.parsing.parse_number(text)` and `is_digit_string(text)` are the
  helpers it uses.
- `dining.simulation.Simulation(settings, out)` writes its event lines to
  `out` (standard output when `None`); `run()` starts the threads, monitors
  them and waits for them to finish.
- `dining.timing` offers `timestamp_ms()` and `precise_sleep(milliseconds)`,
  the clock and polling sleep that the simulation uses.

## Running the tests

```
pip install .[test]
pytest
```