from typing import List

from fastapi import APIRouter, Depends, Path, status

from restaurant_api.api.v1.dependencies import get_current_principal, get_restaurant_service, pagination
from restaurant_api.features.restaurants.schemas import RestaurantCreateIn, RestaurantOut, RestaurantUpdateIn
from restaurant_api.features.restaurants.services import RestaurantService
from restaurant_api.features.schemas import MessageOut
from restaurant_api.security.policy import Principal

_errors = {
    401: {"description": "Token invalide ou expiré"},
    403: {"description": "Forbidden"},
    404: {"description": "Not Found"},
}

# /restaurants : écritures
router = APIRouter(
    prefix="/restaurants",
    tags=["restaurants"],
    responses=_errors,
)

# /users/{user_id}/restaurants : lectures par propriétaire
user_restaurants_router = APIRouter(
    prefix="/users/{user_id}/restaurants",
    tags=["restaurants"],
    responses=_errors,
)

# -----------------------------
# Create
# -----------------------------
@router.post(
    "",
    summary="Créer un restaurant pour l'utilisateur courant",
    status_code=status.HTTP_201_CREATED,
    response_model=RestaurantOut,
)
def create_restaurant(
    payload: RestaurantCreateIn,
    principal: Principal = Depends(get_current_principal),
    svc: RestaurantService = Depends(get_restaurant_service),
):
    return svc.create(principal, payload)

# -----------------------------
# Update (owner/admin)
# -----------------------------
@router.put(
    "/{restaurant_id}",
    summary="Mettre à jour un restaurant",
    description="Mise à jour partielle : seuls les champs fournis et non vides sont modifiés.",
    response_model=RestaurantOut,
)
def update_restaurant(
    payload: RestaurantUpdateIn,
    restaurant_id: int = Path(..., ge=1),
    principal: Principal = Depends(get_current_principal),
    svc: RestaurantService = Depends(get_restaurant_service),
):
    return svc.update(principal, restaurant_id, payload)

# -----------------------------
# Delete (owner/admin)
# -----------------------------
@router.delete(
    "/{restaurant_id}",
    summary="Supprimer un restaurant",
    response_model=MessageOut,
)
def delete_restaurant(
    restaurant_id: int = Path(..., ge=1),
    principal: Principal = Depends(get_current_principal),
    svc: RestaurantService = Depends(get_restaurant_service),
):
    svc.delete(principal, restaurant_id)
    return MessageOut(message="Restaurant deleted successfully")

# -----------------------------
# Lectures par utilisateur
# -----------------------------
@user_restaurants_router.get(
    "",
    summary="Lister les restaurants d'un utilisateur",
    response_model=List[RestaurantOut],
)
def list_user_restaurants(
    user_id: int = Path(..., ge=1),
    p=Depends(pagination),
    principal: Principal = Depends(get_current_principal),
    svc: RestaurantService = Depends(get_restaurant_service),
):
    return svc.list_for_user(principal, user_id, **p)

@user_restaurants_router.get(
    "/{restaurant_id}",
    summary="Récupérer un restaurant d'un utilisateur",
    response_model=RestaurantOut,
)
def get_user_restaurant(
    user_id: int = Path(..., ge=1),
    restaurant_id: int = Path(..., ge=1),
    principal: Principal = Depends(get_current_principal),
    svc: RestaurantService = Depends(get_restaurant_service),
):
    return svc.get_for_user(principal, user_id, restaurant_id)
