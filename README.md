# schedchat

Two small teaching tools in one package:

- **A CPU scheduling simulator** (`schedchat.scheduler`). It reads a task list and
  prints the schedules that First-Come-First-Served, Shortest Job First, Priority and
  Round Robin scheduling produce.
- **A TCP chat** (`schedchat.server`, `schedchat.client`). A server accepts clients
  and passes each message it receives on to every other connected client. An
  interactive client connects to it.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Scheduling simulator

Put the tasks in a file as whitespace-separated records: a name of at most 9
characters, a priority and a CPU burst time. Priority and burst must be positive whole
numbers. A higher priority number means a higher priority.

```
T1 2 10
T2 5 3
T3 1 7
```

Then run:

```
schedchat-schedule schedule.txt
schedchat-schedule schedule.txt --quantum 3
```

If you give no path, the program reads `schedule.txt` from the current directory.
`--quantum` sets the Round Robin time quantum (default 5) and must be positive.

Records with a name that is too long, or with a priority or burst that is not
positive, are reported and skipped. At most 100 tasks are processed; a warning is
printed if the file holds more. A record that is cut short or has a field that is not
a whole number stops loading altogether. If the file cannot be read, is malformed, or
holds no valid task, the program prints an error and exits with status 1.

The program prints four tab-separated tables:

1. FCFS: tasks in file order, with waiting and turnaround times.
2. SJF: tasks ordered by CPU burst, shortest first.
3. Priority: tasks ordered by priority, highest first.
4. Round Robin: one line per time slice, with the burst time still remaining after
   that slice.

Each table after FCFS starts from the order the previous one left, which decides how
ties are broken.

### From Python

```python
from schedchat.scheduler import (
    parse_tasks, load_tasks, fcfs, sjf, priority_scheduling, round_robin, format_report,
)

tasks = parse_tasks("T1 2 10\nT2 5 3\n")
for entry in sjf(tasks):
    print(entry.task.name, entry.waiting_time, entry.turnaround_time)
for step in round_robin(tasks, 5):
    print(step.task.name, step.remaining, step.elapsed)
print(format_report(tasks, 5))
```

- `Task(name, priority, cpu_burst)` is a frozen dataclass.
- `fcfs`, `sjf` and `priority_scheduling` return lists of `ScheduleEntry`
  (`task`, `waiting_time`, `turnaround_time`).
- `round_robin(tasks, time_quantum)` returns a list of `RoundRobinStep`
  (`task`, `remaining`, `elapsed`); it raises `ValueError` if the quantum is not
  positive.
- `parse_tasks(text)` and `load_tasks(path)` raise `TaskLoadError` when the input
  cannot be read, is malformed, or holds no valid task. Skipped records are reported
  through the `schedchat.scheduler` logger.

## Chat server and client

Start the server. By default it listens on port 8080 on all interfaces and keeps up
to four clients:

```
schedchat-server
schedchat-server --host 127.0.0.1 --port 9000 --max-clients 8
```

In other terminals, start clients. By default they connect to 127.0.0.1:8080:

```
schedchat-client
schedchat-client --host 127.0.0.1 --port 9000
```

Each new client gets the message `Welcome to the server!`. Anything a client sends is
printed on the server and passed on to every other connected client. A client that
connects while every slot is taken still gets the welcome message, but the server
never reads from it or sends it messages from others.

The client sends each line you type and then waits for one reply from the server,
which it prints as `Server: ...`. The first reply it prints is therefore usually the
welcome message. It stops at end of input or when the server closes the connection.
If the server cannot be reached it prints an error and exits with status 1.

### From Python

```python
from schedchat.server import ChatServer

with ChatServer("127.0.0.1", 0, 4) as server:
    server.serve_forever()
```

`serve_once(timeout)` runs a single round of the event loop and returns the number of
sockets that were ready; it is useful in tests and in programs that have their own
loop. `close()` closes every client connection and the listening socket.

`schedchat.client.run_client(host, port, input_stream, output_stream)` runs the
client against any text streams, defaulting to standard input and output.