from typing import Optional

from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import (
    get_auth_service,
    get_current_user_id,
    get_optional_bearer_token,
)
from app.features.authentication.services import AuthService
from app.features.authentication.schemas import (
    RegisterIn,
    LoginIn,
    ForgotPasswordIn,
    ResetPasswordIn,
    AuthOut,
    PublicUserOut,
    ForgotPasswordOut,
    SuccessOut,
)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)

# -----------------------------
# Register
# -----------------------------
@router.post(
    "/register",
    summary="Créer un compte",
    description="Crée l'utilisateur et ouvre directement une session.",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthOut,
    responses={
        400: {"description": "Nom, email ou mot de passe manquant"},
        409: {"description": "Email déjà utilisé"},
    },
)
def register(payload: RegisterIn, svc: AuthService = Depends(get_auth_service)):
    return svc.register(payload)

# -----------------------------
# Login
# -----------------------------
@router.post(
    "/login",
    summary="Se connecter",
    description="Chaque connexion émet un nouveau token, indépendant des sessions déjà ouvertes.",
    response_model=AuthOut,
    responses={401: {"description": "Identifiants invalides ou manquants"}},
)
def login(payload: LoginIn, svc: AuthService = Depends(get_auth_service)):
    return svc.login(payload)

# -----------------------------
# Logout
# -----------------------------
@router.post(
    "/logout",
    summary="Se déconnecter",
    description="Révoque la session du bearer token s'il y en a un. Répond toujours succès.",
    response_model=SuccessOut,
)
def logout(
    token: Optional[str] = Depends(get_optional_bearer_token),
    svc: AuthService = Depends(get_auth_service),
):
    svc.logout(token)
    return SuccessOut()

# -----------------------------
# Mot de passe oublié / reset
# -----------------------------
@router.post(
    "/forgot-password",
    summary="Demander un token de reset",
    description="Répond 200 que l'email soit connu ou non ; `resetToken` vaut null si inconnu.",
    response_model=ForgotPasswordOut,
    responses={400: {"description": "Email manquant"}},
)
def forgot_password(payload: ForgotPasswordIn, svc: AuthService = Depends(get_auth_service)):
    # TODO: envoyer le token par email au lieu de le renvoyer dans la réponse
    return svc.forgot_password(payload)

@router.post(
    "/reset-password",
    summary="Changer le mot de passe avec un token de reset",
    response_model=SuccessOut,
    responses={400: {"description": "Champs manquants ou token invalide/expiré"}},
)
def reset_password(payload: ResetPasswordIn, svc: AuthService = Depends(get_auth_service)):
    svc.reset_password(payload)
    return SuccessOut()

# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=PublicUserOut,
    responses={401: {"description": "Token absent ou invalide"}},
)
def me(
    user_id: int = Depends(get_current_user_id),
    svc: AuthService = Depends(get_auth_service),
):
    return svc.get_user(user_id)
