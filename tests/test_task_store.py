# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskbot.errors import InvalidFormatError, StorageError, StorageErrorKind
from taskbot.tasks.task_models import TaskKind, create_task
from taskbot.tasks.task_store import TaskStore


def _sample_tasks():
    todo = create_task(TaskKind.TODO, "read book")
    deadline = create_task(TaskKind.DEADLINE, "submit", "2024-12-01")
    deadline.mark()
    event = create_task(TaskKind.EVENT, "trip", "2024-01-01", "2024-01-05")
    return [todo, deadline, event]


def test_save_writes_delimited_lines(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    TaskStore(path).save(_sample_tasks())

    assert path.read_text("utf-8") == (
        "0###read book###T###\n"
        "1###submit###D###2024-12-01###\n"
        "0###trip###E###2024-01-01###2024-01-05###\n"
    )
    assert not (tmp_path / "list.txt.tmp").exists()


def test_save_then_load_returns_same_tasks(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "list.txt")
    tasks = _sample_tasks()
    store.save(tasks)
    assert store.load() == tasks


@pytest.mark.parametrize(
    "description",
    ["learn C#", "C##", "#hashtag", "##", "#", "fix ## parser", "a # b #"],
)
def test_descriptions_with_hashes_survive_save_and_load(tmp_path: Path, description: str) -> None:
    store = TaskStore(tmp_path / "list.txt")
    tasks = [
        create_task(TaskKind.TODO, description),
        create_task(TaskKind.DEADLINE, description, "2024-12-01"),
        create_task(TaskKind.EVENT, description, "2024-01-01", "2024-01-05 10:00"),
        create_task(TaskKind.TODO, "after"),
    ]
    tasks[1].mark()
    store.save(tasks)
    assert store.load() == tasks


def test_trailing_hash_line_layout(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    TaskStore(path).save([create_task(TaskKind.TODO, "learn C#")])
    assert path.read_text("utf-8") == "0###learn C####T###\n"
    assert TaskStore(path).load()[0].description == "learn C#"


def test_save_overwrites_previous_content(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "list.txt")
    store.save(_sample_tasks())
    store.save([])
    assert store.path.read_text("utf-8") == ""
    assert store.load() == []


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nested" / "dir" / "list.txt")
    store.save(_sample_tasks()[:1])
    assert store.load()[0].description == "read book"


def test_load_missing_file_is_not_found(tmp_path: Path) -> None:
    with pytest.raises(StorageError) as ei:
        TaskStore(tmp_path / "nope.txt").load()
    assert ei.value.kind is StorageErrorKind.NOT_FOUND


def test_load_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    path.write_text("\n0###read book###T###\n   \n1###buy milk###T###\n\n", "utf-8")
    tasks = TaskStore(path).load()
    assert [t.description for t in tasks] == ["read book", "buy milk"]
    assert [t.done for t in tasks] == [False, True]


def test_single_malformed_line_aborts_load(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    path.write_text("0###read book###T###\nX###\n", "utf-8")

    with pytest.raises(StorageError) as ei:
        TaskStore(path).load()

    assert ei.value.kind is StorageErrorKind.INVALID_FORMAT
    assert "line 2" in str(ei.value)
    assert isinstance(ei.value.__cause__, InvalidFormatError)


def test_unknown_type_tag_is_invalid_format(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    path.write_text("0###read book###Q###\n", "utf-8")
    with pytest.raises(StorageError) as ei:
        TaskStore(path).load()
    assert ei.value.kind is StorageErrorKind.INVALID_FORMAT


def test_non_utf8_file_is_invalid_format(tmp_path: Path) -> None:
    path = tmp_path / "list.txt"
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(StorageError) as ei:
        TaskStore(path).load()
    assert ei.value.kind is StorageErrorKind.INVALID_FORMAT


def test_write_failure(tmp_path: Path) -> None:
    # The target path is an existing directory, so the final replace fails.
    target = tmp_path / "list.txt"
    target.mkdir()
    (target / "keep").write_text("x", "utf-8")

    with pytest.raises(StorageError) as ei:
        TaskStore(target).save(_sample_tasks())
    assert ei.value.kind is StorageErrorKind.WRITE_FAILURE
    assert not (tmp_path / "list.txt.tmp").exists()
