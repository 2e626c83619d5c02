"""
➡️ But : Définir les endpoints /users.

Réceptionne les requêtes HTTP, appelle le service correspondant, retourne les schémas de sortie.
Les routes ne contiennent ni SQL ni logique métier : les contrôles d'accès vivent dans UserService.
"""

from fastapi import APIRouter, Depends, Path

from restaurant_api.api.v1.dependencies import get_current_principal, get_user_service
from restaurant_api.features.schemas import MessageOut
from restaurant_api.features.users.schemas import UserOut, UserUpdateIn
from restaurant_api.features.users.services import UserService
from restaurant_api.security.policy import Principal

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        401: {"description": "Token invalide ou expiré"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
    },
)

@router.get(
    "/{user_id}",
    summary="Récupérer un utilisateur",
    response_model=UserOut,
)
def get_user(
    user_id: int = Path(..., ge=1),
    principal: Principal = Depends(get_current_principal),
    svc: UserService = Depends(get_user_service),
):
    return svc.get(principal, user_id)

@router.put(
    "/{user_id}",
    summary="Mettre à jour un utilisateur",
    description="Mise à jour partielle : seuls les champs fournis et non vides sont modifiés. Le rôle est réservé aux admins.",
    response_model=UserOut,
    responses={409: {"description": "Email déjà utilisé"}},
)
def update_user(
    payload: UserUpdateIn,
    user_id: int = Path(..., ge=1),
    principal: Principal = Depends(get_current_principal),
    svc: UserService = Depends(get_user_service),
):
    return svc.update(principal, user_id, payload)

@router.delete(
    "/{user_id}",
    summary="Supprimer un utilisateur (et ses restaurants)",
    response_model=MessageOut,
)
def delete_user(
    user_id: int = Path(..., ge=1),
    principal: Principal = Depends(get_current_principal),
    svc: UserService = Depends(get_user_service),
):
    svc.delete(principal, user_id)
    return MessageOut(message="User deleted successfully")
