"""
➡️ But : Hasher et vérifier les mots de passe.

Utilise passlib (CryptContext) avec pbkdf2_sha256 : hash salé, vérification par recalcul.

🔹 Avantages :

Le hash stocké n'est jamais réversible ni exposé par l'API.

Changer d'algorithme plus tard = ajouter un schéma au contexte (deprecated="auto").
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    return pwd_context.verify(password, hashed_password)
