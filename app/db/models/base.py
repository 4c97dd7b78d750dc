"""
➡️ But : Définir la structure des tables (ORM).

Contient les classes héritant de SQLModel.

Représente les objets stockés. Ici on représente les propriétés communes de toutes les tables.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Le même code tourne sur la base en mémoire (par défaut) ou sur un fichier SQLite.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # SQLite relit les dates sans fuseau : ce sont des dates UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def utc_field(**kwargs):
    """Colonne datetime avec fuseau (valeurs toujours en UTC)."""
    return Field(sa_type=DateTime(timezone=True), **kwargs)


class IdModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)


class BaseModelDB(IdModelDB, table=False):
    created_at: datetime = utc_field(default_factory=utcnow)
