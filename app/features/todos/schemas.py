"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TodoCreate → corps de requête POST

TodoUpdate → corps PATCH (seuls les champs envoyés sont appliqués)

TodoOut / ActivityLogOut → réponses de l’API

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).

🔹 Avantages :

Validation automatique.

Documente les champs dans Swagger (types, exemples...).

Les clés JSON sont en camelCase (dueDate, durationValue…), le code Python reste en snake_case.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.db.models.todos import ActivityAction, DurationUnit, TodoPriority, TodoStatus


class _CamelIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("due_date", mode="before", check_fields=False)
    @classmethod
    def _blank_date_is_none(cls, v):
        # "" = pas de date (sur un PATCH : effacer la date)
        if isinstance(v, str) and not v.strip():
            return None
        return v


class TodoCreate(_CamelIn):
    title: Optional[str] = Field(None, examples=["Acheter du lait"])
    description: Optional[str] = Field(None, examples=["Demi-écrémé"])
    status: Optional[TodoStatus] = None
    priority: Optional[TodoPriority] = None
    duration_value: Optional[int] = Field(None, ge=1, examples=[30])
    duration_unit: Optional[DurationUnit] = None
    due_date: Optional[date] = Field(None, examples=["2025-01-31"])


class TodoUpdate(_CamelIn):
    """
    PATCH partiel : un champ absent n'est pas touché,
    un champ envoyé à null (ou "") est effacé quand il est optionnel.
    """
    title: Optional[str] = Field(None, examples=["Aller courir"])
    description: Optional[str] = None
    status: Optional[TodoStatus] = Field(None, examples=["completed"])
    priority: Optional[TodoPriority] = None
    duration_value: Optional[int] = Field(None, ge=1)
    duration_unit: Optional[DurationUnit] = None
    due_date: Optional[date] = None


class TodoOut(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    status: TodoStatus
    priority: TodoPriority
    duration_value: Optional[int] = None
    duration_unit: Optional[DurationUnit] = None
    due_date: Optional[date] = None
    created_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ActivityLogOut(BaseModel):
    id: int
    user_id: int
    action: ActivityAction
    todo_title: str
    timestamp: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
