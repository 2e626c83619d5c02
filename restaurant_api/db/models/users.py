"""
➡️ But : Table User (comptes) et énumération des rôles.

Un User possède zéro ou plusieurs Restaurants (user.id ← restaurant.user_id).
"""

from enum import Enum

from sqlmodel import Field

from .base import BaseModelDB


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


class User(BaseModelDB, table=True):
    name: str = Field(max_length=100)
    email: str = Field(index=True, unique=True, max_length=100)
    hashed_password: str = Field(max_length=255)
    role: str = Field(default=Role.USER.value, max_length=20)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value
