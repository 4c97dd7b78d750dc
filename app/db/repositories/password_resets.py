from typing import Optional
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.users import PasswordReset

class PasswordResetRepository(BaseRepository[PasswordReset]):
    model = PasswordReset

    def get_by_token(self, token: str) -> Optional[PasswordReset]:
        return self.session.exec(
            select(self.model).where(self.model.token == token)
        ).first()

    def delete_for_user(self, user_id: int, *, commit: bool = True) -> int:
        pending = self.session.exec(
            select(self.model).where(self.model.user_id == user_id)
        ).all()
        for rec in pending:
            self.session.delete(rec)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        return len(pending)
