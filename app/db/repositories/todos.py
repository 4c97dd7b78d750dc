"""
➡️ But : Encapsuler toutes les opérations de stockage sur les tâches.

TodoRepository : CRUD sur la table Todo, toujours filtré par propriétaire.

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Impossible de lire la tâche d'un autre utilisateur par erreur : chaque lecture prend un user_id.
"""

from typing import Optional, Sequence
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.todos import Todo

class TodoRepository(BaseRepository[Todo]):
    model = Todo

    def list_for_user(self, user_id: int) -> Sequence[Todo]:
        # ordre d'insertion
        return self.session.exec(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.id)
        ).all()

    def get_owned(self, todo_id: int, user_id: int) -> Optional[Todo]:
        return self.session.exec(
            select(self.model)
            .where(self.model.id == todo_id)
            .where(self.model.user_id == user_id)
        ).first()
