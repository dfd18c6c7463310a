# tests/test_store.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from taskdesk.models.models import Priority, Role, TaskStatus
from taskdesk.models.schemas import TaskPatch

from .factories import make_task, make_user


def test_user_ids_are_sequential(store) -> None:
    users = [make_user(store, f"user{i}") for i in range(5)]
    assert [u.id for u in users] == [1, 2, 3, 4, 5]
    assert [u.id for u in store.get_all_users()] == [1, 2, 3, 4, 5]


def test_create_user_defaults(store) -> None:
    u = make_user(store)
    assert u.role == Role.EMPLOYEE
    assert u.is_active is True
    assert u.joined_at.tzinfo is not None
    assert store.get_user(u.id) == u


def test_create_user_keeps_explicit_role_and_flag(store) -> None:
    u = make_user(store, role="manager", is_active=False)
    assert u.role == Role.MANAGER
    assert u.is_active is False


def test_create_user_does_not_enforce_unique_username(store) -> None:
    a = make_user(store, "dup")
    b = make_user(store, "dup")
    assert a.id != b.id
    # lookup returns the first match
    assert store.get_user_by_username("dup") == a


def test_get_user_by_username_is_exact(store) -> None:
    u = make_user(store, "Alice")
    assert store.get_user_by_username("Alice") == u
    assert store.get_user_by_username("alice") is None
    assert store.get_user_by_username("nobody") is None


def test_get_user_missing_returns_none(store) -> None:
    assert store.get_user(42) is None


def test_create_task_defaults(store) -> None:
    t = make_task(store)
    assert t.id == 1
    assert t.progress == 0
    assert t.description is None
    assert t.assignee_id is None
    assert t.due_date is None
    assert t.created_at.tzinfo is not None


def test_create_task_accepts_dangling_assignee(store) -> None:
    t = make_task(store, assignee_id=999)
    assert t.assignee_id == 999
    assert store.get_tasks_by_assignee(999) == [t]


def test_update_task_changes_only_given_fields(store) -> None:
    t = make_task(store, description="d", progress=10, priority="high")
    patch = TaskPatch(status="completed")

    once = store.update_task(t.id, patch)
    assert once is not None
    assert once.status == TaskStatus.COMPLETED
    assert once.title == t.title
    assert once.description == "d"
    assert once.priority == Priority.HIGH
    assert once.progress == 10
    assert once.created_at == t.created_at

    twice = store.update_task(t.id, patch)
    assert twice == once


def test_update_task_can_clear_nullable_field(store) -> None:
    t = make_task(store, description="d", assignee_id=1)
    updated = store.update_task(t.id, TaskPatch(description=None, assignee_id=None))
    assert updated.description is None
    assert updated.assignee_id is None


def test_update_unknown_task_returns_none(store) -> None:
    t = make_task(store)
    assert store.update_task(99, TaskPatch(status="completed")) is None
    assert store.get_all_tasks() == [t]


def test_patch_validates_like_create() -> None:
    with pytest.raises(ValidationError):
        TaskPatch(progress=101)
    with pytest.raises(ValidationError):
        TaskPatch(status="done")
    with pytest.raises(ValidationError):
        TaskPatch(title=None)


def test_patch_normalizes_naive_due_date(store) -> None:
    t = make_task(store)
    updated = store.update_task(t.id, TaskPatch(due_date=datetime(2030, 1, 1)))
    assert updated.due_date == datetime(2030, 1, 1, tzinfo=timezone.utc)


def test_delete_task(store) -> None:
    t = make_task(store)
    assert store.delete_task(t.id) is True
    assert store.get_task(t.id) is None
    assert store.delete_task(t.id) is False
    assert store.delete_task(12345) is False


def test_ids_not_reused_after_delete(store) -> None:
    a = make_task(store)
    store.delete_task(a.id)
    b = make_task(store)
    assert b.id == a.id + 1


def test_tasks_by_assignee(store) -> None:
    a = make_user(store, "a")
    b = make_user(store, "b")
    t1 = make_task(store, assignee_id=a.id)
    make_task(store, assignee_id=b.id)
    t3 = make_task(store, assignee_id=a.id)
    make_task(store)
    assert store.get_tasks_by_assignee(a.id) == [t1, t3]


@pytest.mark.parametrize(
    ("start", "delta", "expected"),
    [(50, 10, 60), (95, 10, 100), (5, -10, 0), (0, 0, 0)],
)
def test_adjust_progress_clamps(store, start, delta, expected) -> None:
    t = make_task(store, progress=start)
    assert store.adjust_progress(t.id, delta).progress == expected


def test_adjust_progress_unknown_task(store) -> None:
    assert store.adjust_progress(7, 10) is None


def test_seed_data(seeded_store) -> None:
    users = seeded_store.get_all_users()
    tasks = seeded_store.get_all_tasks()
    assert [u.username for u in users] == ["admin", "manager1", "employee1"]
    assert [u.role for u in users] == [Role.ADMIN, Role.MANAGER, Role.EMPLOYEE]
    assert [t.status for t in tasks] == [TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, TaskStatus.PENDING]
    assert [t.progress for t in tasks] == [75, 100, 25]
    # counters continue after the seed
    assert make_user(seeded_store, "new").id == 4
    assert make_task(seeded_store).id == 4


def test_concurrent_creates_get_unique_sequential_ids(store) -> None:
    n = 200
    with ThreadPoolExecutor(max_workers=16) as pool:
        tasks = list(pool.map(lambda i: make_task(store, f"t{i}"), range(n)))

    assert sorted(t.id for t in tasks) == list(range(1, n + 1))
    assert store.count_tasks() == n
    assert [t.id for t in store.get_all_tasks()] == list(range(1, n + 1))


def test_concurrent_progress_updates_are_not_lost(store) -> None:
    t = make_task(store)
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda _: store.adjust_progress(t.id, 1), range(100)))

    assert store.get_task(t.id).progress == 100
