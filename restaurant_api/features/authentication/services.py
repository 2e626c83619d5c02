import logging
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.exc import IntegrityError

from restaurant_api.core.errors import ConflictError, UnauthorizedError
from restaurant_api.db.models.users import Role, User
from restaurant_api.db.repositories.users import UserRepository
from restaurant_api.security.password import verify_password, hash_password
from restaurant_api.security.policy import Principal
from restaurant_api.security.tokens import JWTSettings, create_access_token, decode_token
from restaurant_api.features.authentication.schemas import RegisterIn, LoginIn, LoginOut
from restaurant_api.features.users.schemas import UserOut

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service d'authentification : orchestre le repository User + tokens.
    Ne contient pas d'accès SQL direct et lève des AppError propres.
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        jwt_settings: JWTSettings,
        now_fn: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.user_repo = user_repo
        self.jwt = jwt_settings
        self.now_fn = now_fn

    # ---------- Register ----------
    def register(self, payload: RegisterIn) -> User:
        if self.user_repo.email_taken(payload.email):
            raise ConflictError("Failed to register user", "user with this email already exists")
        try:
            user = self.user_repo.create(
                name=payload.name,
                email=payload.email,
                hashed_password=hash_password(payload.password),
                role=Role.USER.value,
            )
        except IntegrityError:
            # email inséré entre la vérification et le commit
            self.user_repo.session.rollback()
            raise ConflictError("Failed to register user", "user with this email already exists")
        logger.info("User registered id=%s email=%s", user.id, user.email)
        return user

    # ---------- Login ----------
    def login(self, payload: LoginIn) -> LoginOut:
        user = self.user_repo.get_by_email(payload.email)
        if not user or not verify_password(payload.password, user.hashed_password):
            # Ne pas révéler si l'utilisateur existe
            logger.warning("Failed login for email=%s", payload.email)
            raise UnauthorizedError("Authentication failed", "invalid email or password")

        return LoginOut(
            access_token=self.issue_token(user),
            token_type="bearer",
            expires_in=int(self.jwt.access_ttl.total_seconds()),
            user=UserOut.model_validate(user),
        )

    def issue_token(self, user: User) -> str:
        return create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role,
            settings=self.jwt,
            now=self.now_fn(),
        )

    # ---------- Principal courant depuis l'access token ----------
    def get_current_user(self, *, access_token: str) -> User:
        claims = decode_token(access_token, self.jwt)
        user = self.user_repo.get(int(claims["sub"]))
        if not user:
            raise UnauthorizedError("Invalid or expired token", "User no longer exists")
        return user

    def get_current_principal(self, *, access_token: str) -> Principal:
        return Principal.from_user(self.get_current_user(access_token=access_token))
