"""Task records, their status, and the CSV file that stores them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

DEFAULT_FILE = "tugas.csv"

_DEADLINE = re.compile(r"(\d{2})-(\d{2})-(\d{4})")

PathLike = Union[str, Path]


class Status(str, Enum):
    """Progress of a task, derived from its deadline and completion."""

    DONE = "Selesai"
    LATE = "Telat"
    URGENT = "Urgent"
    PENDING = "Belum Selesai"

    def __str__(self) -> str:
        return self.value


def parse_deadline(text: str) -> Optional[date]:
    """Parse a ``dd-mm-yyyy`` date; return None when it is not a valid date."""
    match = _DEADLINE.fullmatch(text)
    if match is None:
        return None
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def compute_status(
    deadline: Union[date, str, None], done: bool, today: Optional[date] = None
) -> Status:
    """Work out a task's status.

    A deadline that cannot be read counts as already passed.
    """
    if done:
        return Status.DONE
    if today is None:
        today = date.today()
    if isinstance(deadline, str):
        deadline = parse_deadline(deadline)
    if deadline is None or today > deadline:
        return Status.LATE
    if (deadline - today).days <= 1:
        return Status.URGENT
    return Status.PENDING


@dataclass
class Task:
    """One row of the task file."""

    title: str
    course: str
    deadline: str
    notes: str = ""
    done: bool = False
    status: Status = Status.PENDING

    def refresh_status(self, today: Optional[date] = None) -> Status:
        self.status = compute_status(self.deadline, self.done, today)
        return self.status

    def to_fields(self) -> List[str]:
        return [
            self.title,
            self.course,
            self.deadline,
            self.notes,
            self.status.value,
            "1" if self.done else "0",
        ]

    def matches(self, keyword: str) -> bool:
        """True when any visible column contains ``keyword``, ignoring case."""
        needle = keyword.casefold()
        columns = (self.title, self.course, self.deadline, self.notes, self.status.value)
        return any(needle in text.casefold() for text in columns)


def load_tasks(path: PathLike = DEFAULT_FILE, today: Optional[date] = None) -> List[Task]:
    """Read tasks from ``path``; a missing or unreadable file gives no tasks.

    Lines with fewer than four fields are skipped. The stored status is
    ignored and recomputed from the deadline and the completion flag.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            lines = [line.rstrip("\n") for line in stream]
    except OSError:
        return []

    tasks = []
    for line in lines:
        fields = line.split(",")
        if len(fields) < 4:
            continue
        done = len(fields) >= 6 and fields[5] == "1"
        task = Task(fields[0], fields[1], fields[2], fields[3], done=done)
        task.refresh_status(today)
        tasks.append(task)
    return tasks


def save_tasks(path: PathLike, tasks: Iterable[Task]) -> None:
    """Write ``tasks`` to ``path``, replacing its contents."""
    with open(path, "w", encoding="utf-8") as stream:
        for task in tasks:
            stream.write(",".join(task.to_fields()) + "\n")


class TaskList:
    """The task file held in memory; every change is written back at once."""

    def __init__(self, path: PathLike = DEFAULT_FILE, today: Optional[date] = None):
        self.path = Path(path)
        self.today = today
        self.tasks: List[Task] = []
        self.reload()

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    def __enter__(self) -> "TaskList":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()

    def reload(self) -> None:
        self.tasks = load_tasks(self.path, self.today)

    def save(self) -> None:
        save_tasks(self.path, self.tasks)

    def search(self, keyword: str) -> List[int]:
        """Indices of the tasks whose columns contain the trimmed keyword."""
        keyword = keyword.strip()
        return [index for index, task in enumerate(self.tasks) if task.matches(keyword)]

    def remove(self, indices: Iterable[int]) -> None:
        """Remove the tasks at ``indices`` and save."""
        chosen = sorted(set(indices), reverse=True)
        for index in chosen:
            if not 0 <= index < len(self.tasks):
                raise IndexError(f"no task at index {index}")
        for index in chosen:
            del self.tasks[index]
        self.save()

    def set_done(self, index: int, done: bool) -> Task:
        """Mark a task finished or not, recompute its status and save."""
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"no task at index {index}")
        task = self.tasks[index]
        task.done = done
        task.refresh_status(self.today)
        self.save()
        return task