"""CPU scheduling simulations: FCFS, SJF, priority and round robin."""

from __future__ import annotations

import argparse
import itertools
import logging
import re
import sys
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_TASKS = 100
MAX_NAME_LENGTH = 9
DEFAULT_QUANTUM = 5
DEFAULT_SCHEDULE = "schedule.txt"

_INTEGER = re.compile(r"[+-]?\d+")


class TaskLoadError(Exception):
    """Raised when a task list cannot be read or holds no valid task."""


@dataclass(frozen=True)
class Task:
    """A unit of work with a priority (higher runs first) and a CPU burst."""

    name: str
    priority: int
    cpu_burst: int


@dataclass(frozen=True)
class ScheduleEntry:
    """One task's place in a non-preemptive schedule."""

    task: Task
    waiting_time: int
    turnaround_time: int


@dataclass(frozen=True)
class RoundRobinStep:
    """One time slice given to a task by the round-robin scheduler."""

    task: Task
    remaining: int
    elapsed: int


def _parse_int(token: str, record: int) -> int:
    if not _INTEGER.fullmatch(token):
        raise TaskLoadError(f"Malformed task on line {record}.")
    return int(token)


def parse_tasks(text: str) -> list[Task]:
    """Read whitespace-separated ``name priority burst`` records.

    Records with an over-long name or a non-positive priority or burst are
    skipped and reported through the module logger. At most ``MAX_TASKS``
    tasks are kept.
    """
    tokens = iter(text.split())
    tasks: list[Task] = []
    for record, name in enumerate(tokens, start=1):
        fields = list(itertools.islice(tokens, 2))
        if len(fields) < 2:
            raise TaskLoadError(f"Incomplete task on line {record}.")
        priority, cpu_burst = (_parse_int(field, record) for field in fields)

        if len(name) > MAX_NAME_LENGTH:
            logger.error(
                "Error: Task name too long on line %d. Skipping this task.", record
            )
            continue
        if priority <= 0 or cpu_burst <= 0:
            logger.error(
                "Error: Invalid priority or CPU burst time on line %d. "
                "Skipping this task.",
                record,
            )
            continue
        if len(tasks) == MAX_TASKS:
            logger.warning(
                "Warning: Task limit exceeded. Only the first %d tasks will be "
                "processed.",
                MAX_TASKS,
            )
            break
        tasks.append(Task(name, priority, cpu_burst))

    if not tasks:
        raise TaskLoadError("No valid tasks found in the file.")
    return tasks


def load_tasks(path: str | Path) -> list[Task]:
    """Load and validate the task list stored in ``path``."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise TaskLoadError(f"Unable to open file {path}.") from exc
    return parse_tasks(text)


def _exchange_sort(tasks: Iterable[Task], before: Callable[[Task, Task], bool]) -> list[Task]:
    """Exchange sort; ties end up in the same order the scheduler has always used."""
    ordered = list(tasks)
    for i in range(len(ordered)):
        for j in range(i + 1, len(ordered)):
            if before(ordered[j], ordered[i]):
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def _run_in_order(tasks: Iterable[Task]) -> list[ScheduleEntry]:
    entries = []
    clock = 0
    for task in tasks:
        entries.append(ScheduleEntry(task, clock, clock + task.cpu_burst))
        clock += task.cpu_burst
    return entries


def fcfs(tasks: Iterable[Task]) -> list[ScheduleEntry]:
    """First-come-first-served: run tasks in the order given."""
    return _run_in_order(tasks)


def sjf(tasks: Iterable[Task]) -> list[ScheduleEntry]:
    """Non-preemptive shortest job first."""
    return _run_in_order(
        _exchange_sort(tasks, lambda a, b: a.cpu_burst < b.cpu_burst)
    )


def priority_scheduling(tasks: Iterable[Task]) -> list[ScheduleEntry]:
    """Non-preemptive priority scheduling, highest priority first."""
    return _run_in_order(
        _exchange_sort(tasks, lambda a, b: a.priority > b.priority)
    )


def round_robin(tasks: Iterable[Task], time_quantum: int = DEFAULT_QUANTUM) -> list[RoundRobinStep]:
    """Cycle through the tasks, giving each at most ``time_quantum`` per turn."""
    if time_quantum <= 0:
        raise ValueError("time quantum must be positive")
    queue = deque((task, task.cpu_burst) for task in tasks if task.cpu_burst > 0)
    steps = []
    elapsed = 0
    while queue:
        task, remaining = queue.popleft()
        used = min(remaining, time_quantum)
        remaining -= used
        elapsed += used
        steps.append(RoundRobinStep(task, remaining, elapsed))
        if remaining:
            queue.append((task, remaining))
    return steps


def _timing_rows(entries: Sequence[ScheduleEntry]) -> list[str]:
    return [
        f"{e.task.name}\t{e.task.cpu_burst}\t\t{e.waiting_time}\t\t{e.turnaround_time}"
        for e in entries
    ]


def format_report(tasks: Sequence[Task], time_quantum: int = DEFAULT_QUANTUM) -> str:
    """Render all four schedules as the tab-separated report.

    Each algorithm after FCFS starts from the order the previous one left.
    """
    timing_header = "Task\tCPU Burst\tWaiting Time\tTurnaround Time"
    lines = ["First-Come-First-Served (FCFS) Scheduling:", timing_header]
    lines += _timing_rows(fcfs(tasks))

    sjf_entries = sjf(tasks)
    lines += ["", "Shortest Job First (SJF) Scheduling:", timing_header]
    lines += _timing_rows(sjf_entries)

    priority_entries = priority_scheduling(e.task for e in sjf_entries)
    lines += [
        "",
        "Priority Scheduling:",
        "Task\tPriority\tCPU Burst\tWaiting Time\tTurnaround Time",
    ]
    lines += [
        f"{e.task.name}\t{e.task.priority}\t\t{e.task.cpu_burst}"
        f"\t\t{e.waiting_time}\t\t{e.turnaround_time}"
        for e in priority_entries
    ]

    lines += ["", "Round Robin Scheduling:", "Task\tCPU Burst\tRemaining Time"]
    lines += [
        f"{s.task.name}\t{s.task.cpu_burst}\t\t{s.remaining}"
        for s in round_robin((e.task for e in priority_entries), time_quantum)
    ]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Load a schedule file and print every scheduling report."""
    parser = argparse.ArgumentParser(description="Simulate CPU scheduling algorithms.")
    parser.add_argument("schedule", nargs="?", default=DEFAULT_SCHEDULE)
    parser.add_argument("--quantum", type=int, default=DEFAULT_QUANTUM)
    args = parser.parse_args(argv)
    if args.quantum <= 0:
        parser.error("--quantum must be positive")

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    try:
        tasks = load_tasks(args.schedule)
    except TaskLoadError as exc:
        print(f"Error: {exc}")
        print("Error: Could not load tasks. Exiting program.")
        return 1
    finally:
        logger.removeHandler(handler)

    sys.stdout.write(format_report(tasks, args.quantum))
    return 0


if __name__ == "__main__":
    sys.exit(main())