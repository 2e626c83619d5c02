"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_*_service() : crée les services à partir d'une session DB.

get_current_principal() : principal authentifié depuis le header Authorization: Bearer.

pagination() : paramètres communs page et size.
"""

from typing import Optional

from fastapi import Depends, Query, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from restaurant_api.core.config import jwt_settings
from restaurant_api.core.errors import UnauthorizedError
from restaurant_api.db.session import get_session

from restaurant_api.db.repositories.users import UserRepository
from restaurant_api.db.repositories.restaurants import RestaurantRepository

from restaurant_api.features.authentication.services import AuthService
from restaurant_api.features.users.services import UserService
from restaurant_api.features.restaurants.services import RestaurantService

from restaurant_api.security.policy import Principal


def pagination(
    page: int = Query(1, ge=1, description="Numéro de page", examples=[1]),
    size: int = Query(100, ge=1, le=100, description="Taille de page", examples=[20]),
):
    offset = (page - 1) * size
    return {"offset": offset, "limit": size}


# -----------------------------
# Repositories
# -----------------------------
def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)

def get_restaurant_repository(session: Session = Depends(get_session)) -> RestaurantRepository:
    return RestaurantRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_auth_service(user_repo: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(user_repo=user_repo, jwt_settings=jwt_settings)

def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
    restaurant_repo: RestaurantRepository = Depends(get_restaurant_repository),
) -> UserService:
    return UserService(user_repo, restaurant_repo)

def get_restaurant_service(
    restaurant_repo: RestaurantRepository = Depends(get_restaurant_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> RestaurantService:
    return RestaurantService(restaurant_repo, user_repo)


# -----------------------------
# Authentication data
# -----------------------------
# auto_error=False : header absent → notre UnauthorizedError (401 JSON) plutôt que la réponse par défaut
bearer_scheme = HTTPBearer(auto_error=False)

def get_access_token_from_bearer(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> str:
    if credentials is None:
        raise UnauthorizedError("Authorization header is required", "Expected 'Authorization: Bearer <token>'")
    if credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise UnauthorizedError("Invalid auth scheme", "Invalid authorization format, expected 'Bearer TOKEN'")
    return credentials.credentials

def get_current_principal(
    access_token: str = Depends(get_access_token_from_bearer),
    auth_svc: AuthService = Depends(get_auth_service),
) -> Principal:
    return auth_svc.get_current_principal(access_token=access_token)
