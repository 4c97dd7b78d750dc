"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, URL de la base, durées des tokens, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from datetime import timedelta
from typing import List

from pydantic_settings import BaseSettings
from app.security.tokens import TokenSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo-Back"
    ENV: str = "dev"  # dev | prod | test
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB (volatile : tout est perdu au redémarrage)
    # -----------------------------
    DATABASE_URL: str = "sqlite://"  # SQLite en mémoire

    # -----------------------------
    # Auth
    # -----------------------------
    SESSION_TOKEN_BYTES: int = 32     # entropie des tokens de session / reset
    RESET_TTL_MINUTES: int = 15       # durée de vie d'un token de reset

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @property
    def sql_echo(self) -> bool:
        # echo SQL seulement en dev ET en DEBUG, sinon ça pollue les logs
        return self.ENV == "dev" and self.LOG_LEVEL.upper() == "DEBUG"


# Instance globale importable partout
settings = Settings()

# Objet prêt à l'emploi pour les services d'auth
token_settings = TokenSettings(
    nbytes=settings.SESSION_TOKEN_BYTES,
    reset_ttl=timedelta(minutes=settings.RESET_TTL_MINUTES),
)
