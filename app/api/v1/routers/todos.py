"""
➡️ But : Définir les endpoints de l’API.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PATCH, DELETE…)

Résout le bearer token en user_id (get_current_user_id) avant tout appel au service

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

🔹 Avantages :

Automatiquement documentée dans Swagger.

Isolation totale du reste du code : les routes ne contiennent ni SQL ni logique métier.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status
from app.api.v1.dependencies import get_current_user_id, get_todo_service
from app.features.authentication.schemas import SuccessOut
from app.features.todos.schemas import TodoCreate, TodoUpdate, TodoOut, ActivityLogOut
from app.features.todos.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={
        401: {"description": "Unauthorized"},
        404: {"description": "Not Found"},
    },
)

@router.get(
    "",
    summary="Lister mes todos",
    description="Retourne uniquement les tâches de l'utilisateur connecté, dans l'ordre de création.",
    response_model=List[TodoOut],
)
def list_todos(
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.list(user_id)

@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
    responses={400: {"description": "Titre manquant"}},
)
def create_todo(
    payload: TodoCreate,
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.create(user_id, payload)

# déclarée avant /{todo_id}
@router.get(
    "/activity",
    summary="Journal d'activité",
    description="Entrées de l'utilisateur connecté, la plus récente d'abord.",
    response_model=List[ActivityLogOut],
)
def list_activity(
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.list_activity(user_id)

@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
)
def get_todo(
    todo_id: str = Path(..., description="Identifiant du todo"),
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.get(user_id, todo_id)

@router.patch(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    description="Seuls les champs envoyés sont modifiés.",
    response_model=TodoOut,
)
def update_todo(
    payload: TodoUpdate,
    todo_id: str = Path(..., description="Identifiant du todo"),
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.update(user_id, todo_id, payload)

@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    response_model=SuccessOut,
)
def delete_todo(
    todo_id: str = Path(..., description="Identifiant du todo"),
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
):
    svc.delete(user_id, todo_id)
    return SuccessOut()
