"""
➡️ But : Configurer la base (SQLite en mémoire) et gérer les sessions de base de données.

engine : base SQLite en mémoire (sqlite://), partagée par toutes les requêtes via StaticPool.

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Rien n'est persisté : un redémarrage repart d'un état vide.
"""

import anyio
from typing import Any, Dict

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

# Import all models for creating all tables
from app.db.models.users import User, AuthSession, PasswordReset
from app.db.models.todos import Todo, ActivityLog

from app.core.config import settings


def build_engine(url: str, *, echo: bool = False) -> Engine:
    is_sqlite = url.startswith("sqlite:")
    is_memory = url in ("sqlite://", "sqlite:///:memory:")

    connect_args: Dict[str, Any] = {}
    kwargs: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False
    if is_memory:
        # une seule connexion, sinon chaque connexion aurait sa propre base vide
        kwargs["poolclass"] = StaticPool

    return create_engine(url, echo=echo, connect_args=connect_args, **kwargs)


engine: Engine = build_engine(settings.DATABASE_URL, echo=settings.sql_echo)

# Une requête = une unité de travail complète sur la connexion partagée
_unit_of_work_lock = anyio.Lock()


def init_db(bind: Engine = engine) -> None:
    """Crée les tables si elles n'existent pas."""
    SQLModel.metadata.create_all(bind)


async def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    # attente asynchrone : ne bloque aucun thread du threadpool
    async with _unit_of_work_lock:
        with Session(engine) as session:
            yield session
