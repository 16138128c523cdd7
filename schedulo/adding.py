"""Appending new tasks to the task file."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Union

HEADER = "Tugas,Mata Kuliah,Deadline,Keterangan"


class InvalidTaskError(ValueError):
    """Raised when a new task lacks a title or a course."""


def format_deadline(deadline: date) -> str:
    """Format a date as ``dd-mm-yyyy``."""
    return f"{deadline.day:02d}-{deadline.month:02d}-{deadline.year:04d}"


def add_task(
    path: Union[str, Path],
    title: str,
    course: str,
    deadline: date,
    notes: str = "",
) -> str:
    """Append a task to ``path`` and return the line written.

    A new file starts with a header line. Line breaks in the notes become
    spaces.
    """
    if not title or not course:
        raise InvalidTaskError("Harap isi semua kolom!")

    path = Path(path)
    new_file = not path.exists()
    line = ",".join([title, course, format_deadline(deadline), notes.replace("\n", " ")])
    with path.open("a", encoding="utf-8") as stream:
        if new_file:
            stream.write(HEADER + "\n")
        stream.write(line + "\n")
    return line