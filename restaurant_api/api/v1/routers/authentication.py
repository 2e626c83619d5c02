from fastapi import APIRouter, Depends, status

from restaurant_api.api.v1.dependencies import get_auth_service, get_access_token_from_bearer
from restaurant_api.features.authentication.services import AuthService
from restaurant_api.features.authentication.schemas import RegisterIn, LoginIn, LoginOut
from restaurant_api.features.users.schemas import UserOut

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
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
    responses={
        400: {"description": "Corps invalide"},
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
    description="Retourne un access token JWT (24h) et l'utilisateur connecté.",
    response_model=LoginOut,
    responses={401: {"description": "Email ou mot de passe invalide"}},
)
def login(payload: LoginIn, svc: AuthService = Depends(get_auth_service)):
    return svc.login(payload)

# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=UserOut,
    responses={401: {"description": "Token invalide ou expiré"}},
)
def me(
    access_token: str = Depends(get_access_token_from_bearer),
    svc: AuthService = Depends(get_auth_service),
):
    return svc.get_current_user(access_token=access_token)
