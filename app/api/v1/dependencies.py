"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_auth_service() : crée un AuthService à partir d’une session DB.

get_current_user_id() : la "porte" d'autorisation, bearer token -> user_id (401 sinon).

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from typing import Optional

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from app.db.session import get_session

from app.db.repositories.users import UserRepository
from app.db.repositories.sessions import SessionRepository
from app.db.repositories.password_resets import PasswordResetRepository
from app.features.authentication.services import AuthService

from app.db.repositories.todos import TodoRepository
from app.db.repositories.activity_logs import ActivityLogRepository
from app.features.todos.services import TodoService

from app.core.config import token_settings


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(
        user_repo=UserRepository(session),
        session_repo=SessionRepository(session),
        reset_repo=PasswordResetRepository(session),
        token_settings=token_settings,
    )


# -----------------------------
# Todos
# -----------------------------
def get_todo_service(session: Session = Depends(get_session)) -> TodoService:
    return TodoService(
        repo=TodoRepository(session),
        activity_repo=ActivityLogRepository(session),
    )


# -----------------------------
# Authentication data
# -----------------------------
# auto_error=False : on renvoie nous-mêmes 401 {"error": "Unauthorized"} (et pas 403)
bearer_scheme = HTTPBearer(auto_error=False)

def get_optional_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> Optional[str]:
    if not credentials or credentials.scheme.lower() != "bearer":
        return None
    return credentials.credentials or None


def get_current_user_id(
    token: Optional[str] = Depends(get_optional_bearer_token),
    svc: AuthService = Depends(get_auth_service),
) -> int:
    user_id = svc.resolve_session(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
