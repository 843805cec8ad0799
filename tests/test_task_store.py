# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.errors import StorageError
from task_tracker.tasks.task_models import MAX_TASK_ID, parse_task_id
from task_tracker.tasks.task_store import TaskStore


def test_insert_select_update_delete(store) -> None:
    task = store.insert("  Buy milk  ")
    assert task.title == "  Buy milk  "
    assert task.completed is False

    got = store.select_by_id(task.id)
    assert got == task

    updated = store.update(task.id, {"completed": True})
    assert updated is not None
    assert updated.id == task.id
    assert updated.title == "  Buy milk  "
    assert updated.completed is True
    assert updated.updated_at >= task.updated_at

    assert store.delete_by_id(task.id) is True
    assert store.select_by_id(task.id) is None
    assert store.delete_by_id(task.id) is False
    assert store.update(task.id, {"completed": False}) is None


def test_select_all_in_insertion_order(store) -> None:
    assert store.select_all() == []

    ids = [store.insert(f"task {i}").id for i in range(5)]
    assert len(set(ids)) == 5
    assert [t.id for t in store.select_all()] == ids
    assert store.count_tasks() == 5


def test_update_only_touches_given_fields(store) -> None:
    a = store.insert("a")
    b = store.insert("b")

    store.update(a.id, {"title": "a2"})
    a2 = store.select_by_id(a.id)
    assert a2.title == "a2"
    assert a2.completed is False

    store.update(a.id, {"completed": True})
    assert store.select_by_id(b.id) == b


def test_update_ignores_unknown_fields_and_keeps_id(store) -> None:
    task = store.insert("keep")
    updated = store.update(task.id, {"id": 999, "colour": "red"})
    assert updated == task
    assert store.select_by_id(999) is None


def test_ids_that_cannot_resolve(store) -> None:
    store.insert("x")
    too_big = str(2**63)
    for bad in ("abc", "", "1.5", "-1", "0", True, 0, -3, 2**63, too_big, "9" * 23, "\u00b2", "\u0661"):
        assert store.select_by_id(bad) is None
        assert store.update(bad, {"completed": True}) is None
        assert store.delete_by_id(bad) is False


def test_string_ids_resolve_like_ints(store) -> None:
    task = store.insert("x")
    assert store.select_by_id(str(task.id)) == task


def test_insert_rejects_blank_title(store) -> None:
    with pytest.raises(ValueError):
        store.insert("   ")


def test_sqlite_file_can_be_removed_between_runs(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "todo.db"
    store = TaskStore(db)
    store.open()
    store.insert("first")
    assert db.exists()

    store.reset()
    assert not db.exists()

    # Recreated empty on next access.
    assert store.select_all() == []
    again = store.insert("second")
    assert store.select_by_id(again.id).title == "second"


def test_sqlite_persists_across_store_instances(tmp_path: Path) -> None:
    db = tmp_path / "todo.db"
    task = TaskStore(db).insert("durable")

    other = TaskStore(db)
    assert other.select_by_id(task.id) == task


def test_sqlite_failure_is_wrapped(tmp_path: Path) -> None:
    # A directory where the db file should be makes sqlite unable to open it.
    db = tmp_path / "todo.db"
    db.mkdir()
    store = TaskStore(db)
    with pytest.raises(StorageError):
        store.select_all()


def test_titles_are_stored_verbatim(store) -> None:
    for title in ("  padded  ", "Café ☕ déjà vu", "\ttabbed\n", "日本語のタスク"):
        task = store.insert(title)
        assert store.select_by_id(task.id).title == title

    task = store.insert("plain")
    assert store.update(task.id, {"title": " spaced "}).title == " spaced "


def test_largest_sqlite_id_is_accepted_by_parser() -> None:
    assert parse_task_id(str(MAX_TASK_ID)) == MAX_TASK_ID
    assert parse_task_id(" 42 ") == 42
    assert parse_task_id(str(MAX_TASK_ID + 1)) is None
