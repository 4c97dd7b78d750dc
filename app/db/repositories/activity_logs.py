from typing import Sequence
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.todos import ActivityLog

class ActivityLogRepository(BaseRepository[ActivityLog]):
    """Journal en ajout seul : pas de update/delete utilisés côté service."""
    model = ActivityLog

    def list_for_user(self, user_id: int) -> Sequence[ActivityLog]:
        # plus récent d'abord (ordre d'insertion inversé)
        return self.session.exec(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.id.desc())
        ).all()
