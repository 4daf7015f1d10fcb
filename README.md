# diningphilo

A console simulation of the dining philosophers problem. Each philosopher
runs in its own thread and shares a fork (a lock) with each neighbour. A
monitor thread watches for a philosopher starving, or for every
philosopher having eaten enough, and then stops the run.

## Installing

    pip install .

## Running

    diningphilo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]

The same command is available as `python -m diningphilo.cli`.

All times are in milliseconds. Every argument must be a positive whole
number no larger than 2147483647. Leading zeros are accepted; signs,
spaces and any other characters are not. When an argument is invalid, or
there are fewer than four or more than five of them, `Error` is written
to standard error and the exit status is 1. Otherwise the simulation runs
to its end and the exit status is 0.

Example:

    diningphilo 5 800 200 200 7

Each event is printed as one line giving the milliseconds since the start,
the philosopher's number (counting from 1) and what happened. The output
may begin like this:

    0 1 is thinking
    0 1 has taken a fork
    0 1 has taken a fork
    0 1 is eating
    200 1 is sleeping
    ...

The messages are `is thinking`, `has taken a fork`, `is eating`,
`is sleeping` and `dead`.

## When a run ends

- With more than one philosopher, the monitor stops the run when a
  philosopher who has eaten at least once goes longer than `TIME_TO_DIE`
  since the start of its last meal. A `dead` line is printed for that
  philosopher.
- If `MEALS` is given, the run also stops once every philosopher has
  finished at least that many meals. No `dead` line is printed then.
- With a single philosopher there is only one fork: the philosopher takes
  it, puts it down, waits `TIME_TO_DIE` and prints `dead`.

Once the run is stopped no further lines are printed, and the threads
finish their current step before the program exits.

## Using it from Python

```python
import sys

from diningphilo.arguments import parse_arguments
from diningphilo.simulation import run_simulation

settings = parse_arguments(["4", "410", "200", "200", "3"])
table = run_simulation(settings, sys.stdout)
print([p.meals() for p in table.philosophers])
```

- `diningphilo.arguments.parse_number(text)` parses one argument and
  `parse_arguments(args)` builds a frozen `Settings` dataclass
  (`number_of_philosophers`, `time_to_die`, `time_to_eat`,
  `time_to_sleep`, `meals`, the last being `None` when not given). Both
  raise `ArgumentError`, a subclass of `ValueError`, for invalid input.
- `diningphilo.simulation.Table(settings, output)` holds the forks and
  the `Philosopher` objects; `Table.run()` starts all threads and waits
  for them. `run_simulation(settings, output)` does both and returns the
  finished table. `output` defaults to standard output.
- `diningphilo.timing.now_ms()` returns wall-clock time in whole
  milliseconds, and `sleep_ms(duration)` sleeps for at least that many
  milliseconds by polling in short steps.
- `diningphilo.cli.main(argv=None)` is the command's entry point and
  returns the exit status.