"""
➡️ But : Contenir la logique métier : orchestrer les repos, appliquer des règles, gérer les erreurs.

UserService :
- existence d'abord (NotFound), puis policy owner/admin (Forbidden), puis écriture ;
- mise à jour partielle (seuls les champs fournis et non vides écrasent) ;
- changement d'email → revalidation de l'unicité ;
- changement de rôle → admin uniquement ;
- suppression logique, en cascade sur les restaurants de l'utilisateur.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging

from sqlalchemy.exc import IntegrityError

from restaurant_api.core.errors import ConflictError, NotFoundError
from restaurant_api.db.models.users import User
from restaurant_api.db.repositories.restaurants import RestaurantRepository
from restaurant_api.db.repositories.users import UserRepository
from restaurant_api.features.users.schemas import UserUpdateIn
from restaurant_api.security.password import hash_password
from restaurant_api.security.policy import Principal, ensure_admin, ensure_can_act_on

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repo: UserRepository, restaurant_repo: RestaurantRepository):
        self.repo = repo
        self.restaurant_repo = restaurant_repo

    def _get_or_404(self, user_id: int) -> User:
        user = self.repo.get(user_id)
        if not user:
            raise NotFoundError("User not found", "The requested user does not exist")
        return user

    def get(self, principal: Principal, user_id: int) -> User:
        user = self._get_or_404(user_id)
        ensure_can_act_on(principal, user.id)
        return user

    def update(self, principal: Principal, user_id: int, payload: UserUpdateIn) -> User:
        user = self._get_or_404(user_id)
        ensure_can_act_on(principal, user.id, detail="You don't have permission to update this user")

        data = payload.get_update_data()
        changes = {}

        if "role" in data:
            ensure_admin(principal, detail="Only admins can change user roles")
            changes["role"] = data["role"].value

        if "name" in data:
            changes["name"] = data["name"]

        email = data.get("email")
        if email and email != user.email:
            if self.repo.email_taken(email):
                raise ConflictError("Failed to update user", "email already in use")
            changes["email"] = email

        if "password" in data:
            changes["hashed_password"] = hash_password(data["password"])

        if not changes:
            return user

        if "role" in changes and changes["role"] != user.role:
            logger.info("Role change user_id=%s %s -> %s by=%s", user.id, user.role, changes["role"], principal.id)
        try:
            return self.repo.update(user, **changes)
        except IntegrityError:
            self.repo.session.rollback()
            raise ConflictError("Failed to update user", "email already in use")

    def delete(self, principal: Principal, user_id: int) -> None:
        user = self._get_or_404(user_id)
        ensure_can_act_on(principal, user.id, detail="You don't have permission to delete this user")

        # une seule transaction : l'utilisateur et ses restaurants
        removed = self.restaurant_repo.soft_delete_by_owner(user.id, commit=False)
        self.repo.soft_delete(user, commit=False)
        self.repo.session.commit()
        logger.info("User deleted id=%s by=%s restaurants=%s", user.id, principal.id, removed)
