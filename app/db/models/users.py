"""
➡️ But : Définir la structure des tables (ORM).

Représente les objets stockés. Ici on représente les tables ayant un rapport avec les users :
l'utilisateur, ses sessions (bearer tokens) et ses demandes de reset de mot de passe.

🔹 Avantages :

Les tokens ne sont que des lignes : émettre = insérer, révoquer = supprimer.
"""

from datetime import datetime

from sqlmodel import Field

from .base import BaseModelDB, utc_field


class User(BaseModelDB, table=True):
    name: str
    email: str = Field(index=True, unique=True)  # toujours normalisé (trim + minuscules)
    hashed_password: str


class AuthSession(BaseModelDB, table=True):
    __tablename__ = "auth_session"

    token: str = Field(index=True, unique=True)
    user_id: int = Field(index=True, foreign_key="user.id")


class PasswordReset(BaseModelDB, table=True):
    __tablename__ = "password_reset"

    token: str = Field(index=True, unique=True)
    user_id: int = Field(index=True, foreign_key="user.id")
    expires_at: datetime = utc_field()
