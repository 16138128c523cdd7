"""Command-line front end for the task list."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .adding import InvalidTaskError, add_task
from .tasks import DEFAULT_FILE, Task, TaskList, parse_deadline

MENU = "1. Tambah Tugas\n2. Daftar Tugas\n3. Keluar"
BAD_DEADLINE = "Deadline harus berformat dd-mm-yyyy"


def _format_row(index: int, task: Task) -> str:
    mark = "[x]" if task.done else "[ ]"
    return " | ".join(
        [f"{index}. {task.title}", task.course, task.deadline, task.notes, task.status.value, mark]
    )


def _show(path: str, keyword: str) -> None:
    tasks = TaskList(path)
    for index in tasks.search(keyword):
        print(_format_row(index, tasks[index]))


def _add(path: str, title: str, course: str, deadline_text: str, notes: str) -> int:
    deadline = parse_deadline(deadline_text)
    if deadline is None:
        print(BAD_DEADLINE, file=sys.stderr)
        return 2
    try:
        add_task(path, title, course, deadline, notes)
    except InvalidTaskError as error:
        print(error, file=sys.stderr)
        return 1
    print("Tugas berhasil ditambahkan!")
    return 0


def _cmd_add(args: argparse.Namespace) -> int:
    return _add(args.file, args.title, args.course, args.deadline, args.notes)


def _cmd_list(args: argparse.Namespace) -> int:
    _show(args.file, args.search)
    return 0


def _cmd_remove(args: argparse.Namespace) -> int:
    try:
        TaskList(args.file).remove(args.indices)
    except IndexError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


def _cmd_mark(args: argparse.Namespace) -> int:
    try:
        TaskList(args.file).set_done(args.index, args.done)
    except IndexError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


def _interactive_add(path: str) -> None:
    try:
        title = input("Tugas: ").strip()
        course = input("Mata Kuliah: ").strip()
        deadline = input("Deadline (dd-mm-yyyy): ").strip()
        notes = input("Keterangan: ")
    except EOFError:
        return
    _add(path, title, course, deadline, notes)


def _menu(path: str) -> int:
    while True:
        print(MENU)
        try:
            choice = input("Pilih: ").strip()
        except EOFError:
            return 0
        if choice == "1":
            _interactive_add(path)
        elif choice == "2":
            _show(path, "")
        elif choice == "3":
            return 0
        else:
            print("Pilihan tidak dikenal")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schedulo", description="Kelola daftar tugas.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="CSV file holding the tasks")
    commands = parser.add_subparsers(dest="command")

    add = commands.add_parser("add", help="add a task")
    add.add_argument("title")
    add.add_argument("course")
    add.add_argument("deadline", help="dd-mm-yyyy")
    add.add_argument("--notes", default="")
    add.set_defaults(handler=_cmd_add)

    show = commands.add_parser("list", help="list tasks")
    show.add_argument("--search", default="")
    show.set_defaults(handler=_cmd_list)

    remove = commands.add_parser("remove", help="remove tasks by index")
    remove.add_argument("indices", type=int, nargs="+")
    remove.set_defaults(handler=_cmd_remove)

    done = commands.add_parser("done", help="mark a task finished")
    done.add_argument("index", type=int)
    done.set_defaults(handler=_cmd_mark, done=True)

    undone = commands.add_parser("undone", help="mark a task unfinished")
    undone.add_argument("index", type=int)
    undone.set_defaults(handler=_cmd_mark, done=False)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a subcommand, or the interactive menu when none is given."""
    args = _build_parser().parse_args(argv)
    if args.command is None:
        return _menu(args.file)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())