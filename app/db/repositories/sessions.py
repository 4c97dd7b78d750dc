"""
➡️ But : Registre des sessions : token opaque -> user_id.

Émettre une session = insérer une ligne ; se déconnecter = la supprimer.
Plusieurs sessions simultanées par utilisateur sont autorisées.
"""

from typing import Optional
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.users import AuthSession

class SessionRepository(BaseRepository[AuthSession]):
    model = AuthSession

    def get_by_token(self, token: str) -> Optional[AuthSession]:
        return self.session.exec(
            select(self.model).where(self.model.token == token)
        ).first()

    def resolve(self, token: str) -> Optional[int]:
        """Lecture pure : renvoie le user_id de la session, ou None."""
        rec = self.get_by_token(token)
        return rec.user_id if rec else None

    def revoke(self, token: str) -> bool:
        rec = self.get_by_token(token)
        if not rec:
            return False
        self.delete(rec)
        return True
