from datetime import datetime, timedelta, timezone

import pytest

from app.core.errors import NotFoundError, ValidationError
from app.db.models.base import as_utc
from app.db.models.todos import ActivityAction, ActivityLog, TodoStatus
from app.db.repositories.activity_logs import ActivityLogRepository
from app.db.repositories.todos import TodoRepository
from app.db.repositories.users import UserRepository
from app.features.todos.schemas import TodoCreate, TodoUpdate
from app.features.todos.services import TodoService, status_change_action

P, I, C = TodoStatus.pending, TodoStatus.in_progress, TodoStatus.completed


@pytest.mark.parametrize("old, new, expected", [
    (P, P, None),
    (P, I, ActivityAction.in_progress),
    (P, C, ActivityAction.completed),
    (I, P, None),
    (I, C, ActivityAction.completed),
    (C, P, ActivityAction.uncompleted),
    (C, I, ActivityAction.in_progress),
    (C, C, None),
])
def test_status_change_action(old, new, expected):
    assert status_change_action(old, new) == expected


@pytest.fixture
def users(session):
    repo = UserRepository(session)
    alice = repo.create(name="Alice", email="alice@test.com", hashed_password="x")
    bob = repo.create(name="Bob", email="bob@test.com", hashed_password="x")
    return alice.id, bob.id


@pytest.fixture
def svc(session):
    return TodoService(TodoRepository(session), ActivityLogRepository(session))


def test_owner_is_fixed_at_creation(svc, users):
    alice, bob = users
    todo = svc.create(alice, TodoCreate(title="Mine"))
    assert todo.user_id == alice

    # un user_id dans le patch n'existe pas dans le schéma : ignoré
    updated = svc.update(alice, todo.id, TodoUpdate.model_validate({"userId": bob, "title": "Still mine"}))
    assert updated.user_id == alice


def test_update_and_delete_are_owner_scoped(svc, users):
    alice, bob = users
    todo = svc.create(alice, TodoCreate(title="Mine"))
    with pytest.raises(NotFoundError):
        svc.update(bob, todo.id, TodoUpdate(title="x"))
    with pytest.raises(NotFoundError):
        svc.delete(bob, todo.id)
    assert [t.title for t in svc.list(alice)] == ["Mine"]


def test_patch_distinguishes_absent_from_null(svc, users):
    alice, _ = users
    todo = svc.create(alice, TodoCreate(title="T", description="d", duration_value=3, duration_unit="days"))

    svc.update(alice, todo.id, TodoUpdate(priority="high"))
    assert todo.description == "d" and todo.duration_value == 3

    svc.update(alice, todo.id, TodoUpdate(description=None, duration_value=None, duration_unit=None))
    assert todo.description is None
    assert todo.duration_value is None
    assert todo.duration_unit is None


def test_null_status_in_patch_is_ignored(svc, users):
    alice, _ = users
    todo = svc.create(alice, TodoCreate(title="T", status="completed"))
    svc.update(alice, todo.id, TodoUpdate(status=None, priority=None))
    assert todo.status == TodoStatus.completed
    assert [e.action for e in svc.list_activity(alice)] == [ActivityAction.created]


def test_null_title_in_patch_is_rejected(svc, users):
    alice, _ = users
    todo = svc.create(alice, TodoCreate(title="T"))
    with pytest.raises(ValidationError):
        svc.update(alice, todo.id, TodoUpdate(title=None))
    assert svc.get(alice, todo.id).title == "T"


def test_status_entry_uses_title_after_patch(svc, users):
    alice, _ = users
    todo = svc.create(alice, TodoCreate(title="Before"))
    svc.update(alice, todo.id, TodoUpdate(title="After", status="completed"))
    latest = svc.list_activity(alice)[0]
    assert latest.action == ActivityAction.completed
    assert latest.todo_title == "After"


def test_activity_survives_deletion(svc, users):
    alice, _ = users
    todo = svc.create(alice, TodoCreate(title="Gone"))
    svc.delete(alice, todo.id)
    assert [(e.action, e.todo_title) for e in svc.list_activity(alice)] == [
        (ActivityAction.deleted, "Gone"),
        (ActivityAction.created, "Gone"),
    ]
    with pytest.raises(NotFoundError):
        svc.get(alice, todo.id)


def test_deleted_ids_are_not_reused(svc, users):
    alice, _ = users
    first = svc.create(alice, TodoCreate(title="One"))
    first_id = first.id
    svc.delete(alice, first_id)
    second = svc.create(alice, TodoCreate(title="Two"))
    assert second.id != first_id


@pytest.mark.parametrize("bad_id", ["abc", "0", 0, -3, "", None])
def test_unreadable_ids_are_not_found(svc, users, bad_id):
    alice, _ = users
    svc.create(alice, TodoCreate(title="Mine"))
    with pytest.raises(NotFoundError):
        svc.get(alice, bad_id)
    with pytest.raises(NotFoundError):
        svc.delete(alice, bad_id)


def test_numeric_string_id_is_accepted(svc, users):
    alice, _ = users
    todo = svc.create(alice, TodoCreate(title="Mine"))
    assert svc.get(alice, str(todo.id)).id == todo.id


def test_stored_timestamps_are_utc(svc, users, session):
    alice, _ = users
    todo = svc.create(alice, TodoCreate(title="When"))
    session.expire_all()
    created = as_utc(svc.get(alice, todo.id).created_at)
    logged = as_utc(svc.list_activity(alice)[0].timestamp)
    now = datetime.now(timezone.utc)
    assert created.utcoffset() == timedelta(0)
    assert abs(now - created) < timedelta(minutes=1)
    assert abs(now - logged) < timedelta(minutes=1)


def test_activity_log_has_a_single_time_column():
    assert "timestamp" in ActivityLog.model_fields
    assert "created_at" not in ActivityLog.model_fields
