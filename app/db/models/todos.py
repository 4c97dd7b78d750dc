"""
➡️ But : Définir la structure des tables (ORM).

Représente les tâches (Todo) et le journal d'activité de chaque utilisateur.

Le propriétaire est une simple référence user_id, fixée à la création et jamais modifiée.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field

from .base import BaseModelDB, IdModelDB, utc_field, utcnow


class TodoStatus(str, Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"


class TodoPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class DurationUnit(str, Enum):
    minutes = "minutes"
    hours = "hours"
    days = "days"


class ActivityAction(str, Enum):
    created = "created"
    in_progress = "in-progress"
    completed = "completed"
    uncompleted = "uncompleted"
    deleted = "deleted"


class Todo(BaseModelDB, table=True):
    # un id supprimé n'est jamais réattribué
    __table_args__ = {"sqlite_autoincrement": True}

    user_id: int = Field(index=True, foreign_key="user.id")
    title: str
    description: Optional[str] = None
    status: TodoStatus = Field(default=TodoStatus.pending)
    priority: TodoPriority = Field(default=TodoPriority.medium)
    duration_value: Optional[int] = None
    duration_unit: Optional[DurationUnit] = None
    due_date: Optional[date] = None


class ActivityLog(IdModelDB, table=True):
    __tablename__ = "activity_log"

    # pas de FK vers todo : l'entrée survit à la suppression de la tâche
    user_id: int = Field(index=True, foreign_key="user.id")
    action: ActivityAction
    todo_title: str
    timestamp: datetime = utc_field(default_factory=utcnow)
