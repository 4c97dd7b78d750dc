import logging
from datetime import datetime
from typing import Callable, Optional

from app.core.errors import AuthError, ConflictError, InvalidTokenError, ValidationError
from app.core.logging import mask_token
from app.db.models.base import as_utc, utcnow
from app.db.models.users import User
from app.db.repositories.users import UserRepository
from app.db.repositories.sessions import SessionRepository
from app.db.repositories.password_resets import PasswordResetRepository
from app.security.password import verify_password, hash_password
from app.security.tokens import TokenSettings, new_token
from app.features.authentication.schemas import (
    RegisterIn,
    LoginIn,
    ForgotPasswordIn,
    ResetPasswordIn,
    PublicUserOut,
    AuthOut,
    ForgotPasswordOut,
)

logger = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class AuthService:
    """
    Service d'authentification : orchestre les repositories (users, sessions, resets) + tokens.
    Ne contient pas d'accès SQL direct et lève des erreurs métier (app.core.errors).
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        reset_repo: PasswordResetRepository,
        token_settings: TokenSettings,
        now_fn: Callable[[], datetime] = utcnow,
    ):
        self.user_repo = user_repo
        self.session_repo = session_repo
        self.reset_repo = reset_repo
        self.tokens = token_settings
        self.now_fn = now_fn

    # ---------- Helpers ----------
    def _issue_session(self, user: User) -> AuthOut:
        # toujours un nouveau token, même pour un utilisateur déjà connecté ailleurs
        token = new_token(self.tokens)
        self.session_repo.create(token=token, user_id=user.id)
        return AuthOut(token=token, user=PublicUserOut.model_validate(user))

    # ---------- Register ----------
    def register(self, payload: RegisterIn) -> AuthOut:
        name = (payload.name or "").strip()
        email = normalize_email(payload.email)
        if not name or not email or not (payload.password or "").strip():
            raise ValidationError("Name, email and password are required")

        if self.user_repo.get_by_email(email):
            raise ConflictError("Email already registered")

        user = self.user_repo.create(
            name=name,
            email=email,
            hashed_password=hash_password(payload.password),
        )
        logger.info("User %s registered", user.id)
        return self._issue_session(user)

    # ---------- Login ----------
    def login(self, payload: LoginIn) -> AuthOut:
        # un email ou mot de passe qui n'est pas une chaîne = identifiants invalides (401)
        email = normalize_email(payload.email) if isinstance(payload.email, str) else ""
        password = payload.password if isinstance(payload.password, str) else ""
        if not email or not password:
            raise AuthError("Email and password are required")

        user = self.user_repo.get_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            # Ne pas révéler si l'utilisateur existe
            logger.warning("Failed login attempt")
            raise AuthError("Invalid email or password")

        logger.info("User %s logged in", user.id)
        return self._issue_session(user)

    # ---------- Logout ----------
    def logout(self, token: Optional[str]) -> None:
        # Logout idempotent : silencieux si token absent ou inconnu
        if token and self.session_repo.revoke(token):
            logger.info("Session %s revoked", mask_token(token))

    # ---------- Session -> user ----------
    def resolve_session(self, token: Optional[str]) -> Optional[int]:
        if not token:
            return None
        return self.session_repo.resolve(token)

    def get_user(self, user_id: int) -> PublicUserOut:
        user = self.user_repo.get(user_id)
        if not user:
            raise AuthError("Unauthorized")
        return PublicUserOut.model_validate(user)

    # ---------- Mot de passe oublié ----------
    def forgot_password(self, payload: ForgotPasswordIn) -> ForgotPasswordOut:
        email = normalize_email(payload.email)
        if not email:
            raise ValidationError("Email is required")

        user = self.user_repo.get_by_email(email)
        if not user:
            # même statut qu'un email connu : pas d'énumération par le code HTTP
            return ForgotPasswordOut(reset_token=None)

        # seul le dernier token émis reste valable
        self.reset_repo.delete_for_user(user.id, commit=False)
        token = new_token(self.tokens)
        self.reset_repo.create(
            token=token,
            user_id=user.id,
            expires_at=self.now_fn() + self.tokens.reset_ttl,
        )
        logger.info("Password reset issued for user %s", user.id)
        return ForgotPasswordOut(reset_token=token)

    # ---------- Reset du mot de passe ----------
    def reset_password(self, payload: ResetPasswordIn) -> None:
        if not payload.token or not payload.new_password:
            raise ValidationError("Token and new password are required")

        rec = self.reset_repo.get_by_token(payload.token)
        if not rec:
            logger.warning("Unknown reset token %s", mask_token(payload.token))
            raise InvalidTokenError("Invalid or expired reset token")

        if as_utc(rec.expires_at) <= self.now_fn():
            user_id = rec.user_id
            self.reset_repo.delete(rec)
            logger.warning("Expired reset token for user %s", user_id)
            raise InvalidTokenError("Invalid or expired reset token")

        user = self.user_repo.get(rec.user_id)
        if not user:
            self.reset_repo.delete(rec)
            raise InvalidTokenError("Invalid or expired reset token")

        # usage unique : hash + suppression du token dans la même transaction
        self.user_repo.update(user, commit=False, hashed_password=hash_password(payload.new_password))
        self.reset_repo.delete(rec, commit=False)
        self.reset_repo.commit()
        logger.info("Password reset for user %s", user.id)
