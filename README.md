# schedulo

schedulo keeps track of coursework: which assignment, for which course, when
it is due, a short note, and whether it is done. Every task lives in a plain
CSV file, `tugas.csv` in the current directory by default. You can open and
edit that file by hand at any time.

## Installing

```
pip install .
```

## The `schedulo` command

Run it with no subcommand to get a small interactive menu:

```
schedulo
```

The menu offers three choices: `1` adds a task (it asks for the title, the
course, the deadline and a note), `2` lists every task, `3` quits. End of
input also quits.

Everything else is done with subcommands:

```
schedulo add "Essay" "History" 05-09-2024 --notes "Two pages"
schedulo list
schedulo list --search history
schedulo done 0
schedulo undone 0
schedulo remove 0 2
```

- `add TITLE COURSE DEADLINE [--notes TEXT]` appends a task. The deadline
  must be a valid `dd-mm-yyyy` date (exit status 2 otherwise); the title and
  the course must not be empty (exit status 1 otherwise).
- `list [--search KEYWORD]` prints one line per task: its index, title,
  course, deadline, notes, status and `[x]` or `[ ]`. With `--search`, only
  tasks where some column contains the keyword, ignoring case, are shown.
- `done INDEX` and `undone INDEX` mark a task finished or not.
- `remove INDEX...` deletes the tasks at those indices.

`--file PATH`, given before the subcommand, uses another CSV file:
`schedulo --file other.csv list`. An index with no task behind it prints an
error and gives exit status 1. Every change is written back to the file at
once.

## Status

Each task's status is worked out from its deadline and today's date:

| Status          | Meaning                                            |
|-----------------|----------------------------------------------------|
| `Selesai`       | marked as done                                     |
| `Telat`         | not done and the deadline has passed               |
| `Urgent`        | not done and due today or tomorrow                 |
| `Belum Selesai` | not done and more than a day before the deadline   |

A deadline that is not a valid `dd-mm-yyyy` date counts as passed, so such a
task shows as `Telat` until it is marked done.

## Using it from Python

```python
from datetime import date

from schedulo.adding import add_task
from schedulo.tasks import TaskList, compute_status, parse_deadline

add_task("tugas.csv", "Essay", "History", date(2024, 9, 5), "Two pages")

tasks = TaskList("tugas.csv")
for index in tasks.search("history"):
    print(tasks[index])

tasks.set_done(0, True)
tasks.remove([0])

compute_status(parse_deadline("05-09-2024"), False, today=date(2024, 9, 4))
# Status.URGENT
```

- `schedulo.adding.add_task` appends one task and returns the line written.
  It raises `InvalidTaskError` (a `ValueError`) when the title or the course
  is empty. `format_deadline` formats a date as `dd-mm-yyyy`.
- `schedulo.tasks.TaskList` holds the file in memory. It supports `len()`,
  iteration and indexing; `reload()` and `save()` read and write the file;
  `search()` returns matching indices; `remove()` and `set_done()` change the
  list and save it, raising `IndexError` for an index with no task. Used as a
  context manager it saves on exit. Passing `today=` fixes the date used for
  statuses.
- `load_tasks` and `save_tasks` read and write lists of `Task` objects
  directly; `Status` is the enum of the four statuses.

## File format

Each row is: title, course, deadline, notes, status, done (`1` or `0`).
Rows written by `add_task` hold only the first four fields, and a new file
starts with the line `Tugas,Mata Kuliah,Deadline,Keterangan`. Fields are
split on every comma, with no quoting. Rows with fewer than four fields are
skipped; every other row, the header line included, is read as a task. The
stored status is ignored and worked out again on every load. Line breaks in
notes are turned into spaces.

## What it does not do

There is no graphical window, only the command and the Python API. A task's
title, course, deadline or notes cannot be changed once added, other than by
editing the CSV file by hand.