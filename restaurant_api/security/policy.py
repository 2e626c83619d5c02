"""
➡️ But : La règle d'accès unique de l'API.

Un principal (utilisateur authentifié) peut agir sur une ressource si :
    principal.id == owner_id  OU  principal.role == admin

Les services appellent ensure_can_act_on() APRÈS avoir vérifié que la ressource
existe (NotFound passe avant Forbidden) et AVANT toute écriture.
"""

from dataclasses import dataclass

from restaurant_api.core.errors import ForbiddenError
from restaurant_api.db.models.users import Role, User


@dataclass(frozen=True)
class Principal:
    id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(id=user.id, email=user.email, role=user.role)


def can_act_on(principal: Principal, owner_id: int) -> bool:
    return principal.is_admin or principal.id == owner_id


def ensure_can_act_on(
    principal: Principal,
    owner_id: int,
    *,
    detail: str = "You don't have permission to access this resource",
) -> None:
    if not can_act_on(principal, owner_id):
        raise ForbiddenError("Permission denied", detail)


def ensure_admin(principal: Principal, *, detail: str = "Admin only") -> None:
    if not principal.is_admin:
        raise ForbiddenError("Permission denied", detail)
