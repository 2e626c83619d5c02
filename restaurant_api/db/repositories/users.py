"""
➡️ But : Encapsuler toutes les opérations de base de données.

UserRepository : CRUD sur la table User + recherche par email.

Ne contient aucune logique métier, juste de la persistance.
"""

from __future__ import annotations

from typing import Optional
from sqlmodel import select

from restaurant_api.db.repositories.base import BaseRepository
from restaurant_api.db.models.users import User

class UserRepository(BaseRepository[User]):
    """
    Repository pour la table User.
    Hérite du CRUD générique de BaseRepository.
    """
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        """Retourne un utilisateur actif par son email."""
        return self.session.exec(
            self._active().where(self.model.email == email)
        ).first()

    def email_taken(self, email: str) -> bool:
        """
        True si l'email est déjà stocké, y compris sur un compte supprimé
        (l'index unique de la colonne couvre toutes les lignes).
        """
        return self.session.exec(
            select(self.model.id).where(self.model.email == email)
        ).first() is not None
