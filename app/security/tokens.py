import secrets
from dataclasses import dataclass
from datetime import timedelta

# ==========================================================
# 🔧 Configuration : génération des tokens opaques
# ==========================================================

@dataclass(frozen=True)
class TokenSettings:
    """
    Configuration des tokens opaques.

    - `nbytes` : entropie (octets aléatoires) d'un token de session ou de reset
    - `reset_ttl` : durée de vie d’un token de reset de mot de passe
    """
    nbytes: int = 32
    reset_ttl: timedelta = timedelta(minutes=15)


# ==========================================================
# 🎟️ Génération
# ==========================================================

def new_token(settings: TokenSettings) -> str:
    """Token aléatoire, imprévisible, url-safe (bearer ou reset)."""
    return secrets.token_urlsafe(settings.nbytes)
