from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Les entrées sont permissives (champs optionnels) : c'est le service qui décide
# entre 400 (champ manquant) et 401 (login), pas la validation FastAPI.

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Inputs ----------

class RegisterIn(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class LoginIn(CamelModel):
    # Any : un mauvais type doit finir en 401, pas en erreur de validation
    email: Any = None
    password: Any = None

class ForgotPasswordIn(CamelModel):
    email: Optional[str] = None

class ResetPasswordIn(CamelModel):
    token: Optional[str] = None
    new_password: Optional[str] = None


# ---------- Outputs ----------

class PublicUserOut(CamelModel):
    # jamais de hashed_password ici
    id: int
    name: str
    email: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class AuthOut(CamelModel):
    token: str
    user: PublicUserOut

class ForgotPasswordOut(CamelModel):
    reset_token: Optional[str] = None

class SuccessOut(CamelModel):
    success: bool = True
