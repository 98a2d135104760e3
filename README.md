# osalgos

Classic operating-system algorithms as small Python functions, each with an
interactive command that reads its input from standard input.

- CPU scheduling: first come first served, shortest job first,
  non-preemptive priority and round robin
- Disk scheduling: FCFS, SCAN and C-SCAN, with total and average seek time
- Deadlock avoidance: the banker's algorithm (need matrix and safe sequence)
- A bounded producer/consumer buffer, three items by default

No third-party dependencies; Python 3.10 or later.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Commands

Every command prompts for whole numbers on standard input (they may be given
on one line or several) and prints its results. If the input ends early, is
not a number, or is rejected by the algorithm, the command prints an error on
standard error and exits with status 1.

| Command             | What it does                                          |
|---------------------|-------------------------------------------------------|
| `fcfs-cpu`          | FCFS CPU scheduling by arrival time                   |
| `sjf-cpu`           | Shortest job first, all processes arriving at time 0  |
| `priority-cpu`      | Priority scheduling, highest priority number first    |
| `round-robin-cpu`   | Round robin with a time slice                         |
| `fcfs-disk`         | FCFS disk scheduling                                  |
| `scan-disk`         | SCAN: down to track 0, then up                        |
| `cscan-disk`        | C-SCAN: up to the track limit, jump to 0, then up     |
| `bankers`           | Banker's algorithm: need matrix and safe sequence     |
| `producer-consumer` | Menu-driven produce/consume on a buffer of three items|

For example, `sjf-cpu` asks for the number of processes and then the burst
time of each; it prints the execution order as a tab-separated table and the
average waiting and turnaround times to two decimals.

`producer-consumer` reads menu choices (`1` produce, `2` consume, `3` exit)
until `3` or the end of input.

## Using the library

### CPU scheduling: `osalgos.cpu`

A `Process` has a `pid`, a `burst`, and optionally an `arrival` and a
`priority` (both default to 0).

- `fcfs(processes)` orders by arrival time, ties keeping input order.
- `sjf(processes)` orders by burst time.
- `priority(processes)` orders by priority, highest number first.
- `round_robin(processes, time_slice)` shares the CPU in turns; its rows keep
  the input order. A time slice that is not positive raises `ValueError`.

Each raises `ValueError` for an empty list and returns a `Schedule` of
`ScheduledProcess` entries (with `completion`, `waiting` and `turnaround`
times). `Schedule.average_waiting()` and `Schedule.average_turnaround()` give
the means, and `Schedule.render(columns)` formats a table from the column
names `pid`, `arrival`, `priority`, `burst`, `completion`, `waiting` and
`turnaround`.

```python
from osalgos.cpu import Process, sjf

schedule = sjf([Process(pid=1, burst=6), Process(pid=2, burst=2)])
print(schedule.render(["pid", "burst", "waiting", "turnaround"]))
print(schedule.average_waiting())
```

### Disk scheduling: `osalgos.disk`

```python
from osalgos import disk

result = disk.fcfs(50, [82, 170, 43, 140, 24, 16, 190])
print(result.render())        # "50 --> 82 --> 170 --> ..."
print(result.seek, result.average_seek())
```

`disk.scan(head, requests)` and `disk.cscan(head, requests, limit)` return the
same kind of `SeekResult`, whose `queue` holds the sorted track list including
track 0, the head and (for C-SCAN) the limit. Negative tracks, and for C-SCAN
tracks beyond the limit, raise `ValueError`.

### Banker's algorithm: `osalgos.bankers`

```python
from osalgos import bankers

allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
available = [3, 3, 2]

print(bankers.need_matrix(allocation, maximum))
print(bankers.safe_sequence(allocation, maximum, available))  # [1, 3, 4, 0, 2]
```

`safe_sequence` examines processes in repeated passes in index order. When no
safe sequence exists it raises `UnsafeStateError` (a `ValueError`), whose
`finished` attribute lists the processes that could finish.

### Producer and consumer: `osalgos.producer_consumer`

`BoundedBuffer(capacity=3)` counts numbered items. `produce()` returns the new
item's number or raises `BufferFullError`; `consume()` returns the number of
the most recent item or raises `BufferEmptyError`; `count` gives the number
of items held.

## What it does not do

The producer/consumer buffer is a single-threaded counter driven by a menu;
it does not run real producer and consumer threads or use operating-system
semaphores.