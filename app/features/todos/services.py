"""
➡️ But : Contenir la logique métier des tâches : propriété, valeurs par défaut, journal d'activité.

TodoService : reçoit un user_id déjà résolu (la route a validé le bearer token),
n'opère que sur les tâches de cet utilisateur, et écrit le journal d'activité.

Lève des erreurs métier (ValidationError, NotFoundError) traduites en HTTP par app.core.errors.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import Any, Dict, Optional, Sequence, Union

from app.core.errors import NotFoundError, ValidationError
from app.db.models.todos import ActivityAction, ActivityLog, Todo, TodoPriority, TodoStatus
from app.db.repositories.todos import TodoRepository
from app.db.repositories.activity_logs import ActivityLogRepository
from app.features.todos.schemas import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)

# champs qui ne peuvent pas être effacés : un null envoyé est ignoré
_NOT_NULLABLE = ("status", "priority")
_MAX_ID = 2**63 - 1


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_todo_id(todo_id: Union[int, str]) -> Optional[int]:
    """Id entier positif, ou None (traité comme un todo inexistant)."""
    try:
        value = int(todo_id)
    except (TypeError, ValueError):
        return None
    # au-delà d'un INTEGER SQLite, aucun todo ne peut exister
    return value if 1 <= value <= _MAX_ID else None


def status_change_action(old: TodoStatus, new: TodoStatus) -> Optional[ActivityAction]:
    """Action à journaliser pour un changement de statut, ou None."""
    if old == new:
        return None
    if new == TodoStatus.completed:
        return ActivityAction.completed
    if new == TodoStatus.in_progress:
        return ActivityAction.in_progress
    if old == TodoStatus.completed:
        return ActivityAction.uncompleted
    return None


class TodoService:
    def __init__(self, repo: TodoRepository, activity_repo: ActivityLogRepository):
        self.repo = repo
        self.activity = activity_repo

    def _log(self, user_id: int, action: ActivityAction, title: str) -> None:
        # pas de commit : écrit dans la même transaction que la mutation
        self.activity.create(commit=False, user_id=user_id, action=action, todo_title=title)

    def list(self, user_id: int) -> Sequence[Todo]:
        return self.repo.list_for_user(user_id)

    def get(self, user_id: int, todo_id: Union[int, str]) -> Todo:
        # "pas à toi", "n'existe pas" et "id illisible" sont la même erreur
        parsed = parse_todo_id(todo_id)
        todo = self.repo.get_owned(parsed, user_id) if parsed is not None else None
        if not todo:
            raise NotFoundError("Todo not found")
        return todo

    def create(self, user_id: int, payload: TodoCreate) -> Todo:
        title = _clean_text(payload.title)
        if not title:
            raise ValidationError("Title is required")

        todo = self.repo.create(
            commit=False,
            user_id=user_id,
            title=title,
            description=_clean_text(payload.description),
            status=payload.status or TodoStatus.pending,
            priority=payload.priority or TodoPriority.medium,
            duration_value=payload.duration_value,
            duration_unit=payload.duration_unit,
            due_date=payload.due_date,
        )
        self._log(user_id, ActivityAction.created, todo.title)
        self.repo.commit()
        self.repo.session.refresh(todo)
        logger.debug("Todo %s created by user %s", todo.id, user_id)
        return todo

    def update(self, user_id: int, todo_id: Union[int, str], payload: TodoUpdate) -> Todo:
        todo = self.get(user_id, todo_id)
        patch: Dict[str, Any] = payload.model_dump(exclude_unset=True)

        changes: Dict[str, Any] = {}
        for field, value in patch.items():
            if field == "title":
                value = _clean_text(value)
                if not value:
                    raise ValidationError("Title is required")
            elif field == "description":
                value = _clean_text(value)
            elif field in _NOT_NULLABLE and value is None:
                continue
            changes[field] = value

        old_status = todo.status
        self.repo.update(todo, commit=False, **changes)

        action = status_change_action(old_status, todo.status)
        if action is not None:
            self._log(user_id, action, todo.title)

        self.repo.commit()
        self.repo.session.refresh(todo)
        logger.debug("Todo %s updated by user %s (%s)", todo.id, user_id, ", ".join(changes) or "no changes")
        return todo

    def delete(self, user_id: int, todo_id: Union[int, str]) -> None:
        todo = self.get(user_id, todo_id)
        title = todo.title
        self.repo.delete(todo, commit=False)
        self._log(user_id, ActivityAction.deleted, title)
        self.repo.commit()
        logger.debug("Todo %s deleted by user %s", todo_id, user_id)

    def list_activity(self, user_id: int) -> Sequence[ActivityLog]:
        return self.activity.list_for_user(user_id)
