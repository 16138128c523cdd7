from datetime import date

import pytest

from schedulo.tasks import (
    Status,
    Task,
    TaskList,
    compute_status,
    load_tasks,
    parse_deadline,
    save_tasks,
)

TODAY = date(2024, 1, 10)


def test_parse_deadline_valid():
    assert parse_deadline("05-03-2024") == date(2024, 3, 5)


@pytest.mark.parametrize("text", ["31-02-2024", "5-3-2024", "2024-03-05", "Deadline", ""])
def test_parse_deadline_invalid(text):
    assert parse_deadline(text) is None


def test_status_done_wins():
    assert compute_status(date(2000, 1, 1), True, TODAY) is Status.DONE


def test_status_late():
    assert compute_status(date(2024, 1, 9), False, TODAY) is Status.LATE


@pytest.mark.parametrize("deadline", [date(2024, 1, 10), date(2024, 1, 11)])
def test_status_urgent(deadline):
    assert compute_status(deadline, False, TODAY) is Status.URGENT


def test_status_pending():
    assert compute_status(date(2024, 1, 12), False, TODAY) is Status.PENDING


def test_status_from_string_and_invalid():
    assert compute_status("12-01-2024", False, TODAY) is Status.PENDING
    assert compute_status("bukan tanggal", False, TODAY) is Status.LATE
    assert compute_status(None, False, TODAY) is Status.LATE


def test_status_text():
    assert str(compute_status(date(2024, 1, 12), False, TODAY)) == "Belum Selesai"
    assert compute_status(date(2024, 1, 11), False, TODAY).value == "Urgent"
    assert str(compute_status(date(2024, 1, 9), False, TODAY)) == "Telat"
    assert str(compute_status(date(2024, 1, 9), True, TODAY)) == "Selesai"


def test_load_missing_file(tmp_path):
    assert load_tasks(tmp_path / "none.csv", TODAY) == []


def test_load_rows(tmp_path):
    path = tmp_path / "tugas.csv"
    path.write_text(
        "Tugas,Mata Kuliah,Deadline,Keterangan\n"
        "Essay,Kalkulus,20-01-2024,bab 1\n"
        "Kuis,Fisika,01-01-2024,x,Telat,1\n"
        "pendek,baris\n",
        encoding="utf-8",
    )
    tasks = load_tasks(path, TODAY)
    assert len(tasks) == 3
    header, essay, quiz = tasks
    assert header.status is Status.LATE
    assert essay == Task("Essay", "Kalkulus", "20-01-2024", "bab 1", False, Status.PENDING)
    assert quiz.done is True
    assert quiz.status is Status.DONE


def test_save_round_trip(tmp_path):
    path = tmp_path / "tugas.csv"
    tasks = [
        Task("Essay", "Kalkulus", "20-01-2024", "bab 1", False, Status.PENDING),
        Task("Kuis", "Fisika", "11-01-2024", "", True, Status.DONE),
    ]
    save_tasks(path, tasks)
    assert load_tasks(path, TODAY) == tasks
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[1].endswith(",Selesai,1")
    assert lines[0].endswith(",0")


def _make_list(tmp_path):
    path = tmp_path / "tugas.csv"
    save_tasks(
        path,
        [
            Task("Essay", "Kalkulus", "20-01-2024", "bab satu"),
            Task("Laporan", "Fisika", "11-01-2024", "praktikum"),
            Task("Kuis", "Kimia", "30-01-2024", "online"),
        ],
    )
    return TaskList(path, TODAY)


def test_search_case_insensitive_and_trimmed(tmp_path):
    tasks = _make_list(tmp_path)
    assert tasks.search("  fisika ") == [1]
    assert tasks.search("ESSAY") == [0]
    assert tasks.search("urgent") == [1]


def test_search_empty_matches_all(tmp_path):
    tasks = _make_list(tmp_path)
    assert tasks.search("") == [0, 1, 2]
    assert tasks.search("tidak ada") == []


def test_remove_persists(tmp_path):
    tasks = _make_list(tmp_path)
    tasks.remove([0, 2])
    assert [task.title for task in tasks] == ["Laporan"]
    assert [task.title for task in load_tasks(tasks.path, TODAY)] == ["Laporan"]


def test_remove_bad_index_changes_nothing(tmp_path):
    tasks = _make_list(tmp_path)
    with pytest.raises(IndexError):
        tasks.remove([0, 7])
    assert len(tasks) == 3


def test_set_done_updates_status_and_file(tmp_path):
    tasks = _make_list(tmp_path)
    task = tasks.set_done(0, True)
    assert task.status is Status.DONE
    reloaded = load_tasks(tasks.path, TODAY)
    assert reloaded[0].done is True
    tasks.set_done(0, False)
    assert tasks[0].status is Status.PENDING
    assert load_tasks(tasks.path, TODAY)[0].done is False


def test_set_done_bad_index(tmp_path):
    tasks = _make_list(tmp_path)
    with pytest.raises(IndexError):
        tasks.set_done(3, True)


def test_context_manager_saves(tmp_path):
    path = tmp_path / "tugas.csv"
    path.write_text("Essay,Kalkulus,20-01-2024,bab\n", encoding="utf-8")
    with TaskList(path, TODAY) as tasks:
        assert len(tasks) == 1
    assert path.read_text(encoding="utf-8") == "Essay,Kalkulus,20-01-2024,bab,Belum Selesai,0\n"