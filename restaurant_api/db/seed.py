"""
➡️ But : Créer le compte administrateur initial.

/auth/register ne crée que des comptes "user" : le premier admin vient de la configuration
(ADMIN_EMAIL / ADMIN_PASSWORD), au démarrage ou via scripts/create_admin.py.
Idempotent : un compte existant avec cet email est promu admin, jamais dupliqué.
Identifiants invalides (email, mot de passe hors 8..72) : rien n'est créé, un warning est loggé.
"""

import logging
from typing import Optional

from pydantic import ValidationError
from sqlmodel import Session

from restaurant_api.db.models.users import Role, User
from restaurant_api.db.repositories.users import UserRepository
from restaurant_api.features.authentication.schemas import RegisterIn
from restaurant_api.security.password import hash_password

logger = logging.getLogger(__name__)


def seed_admin(session: Session, *, email: str, password: str, name: str = "Administrator") -> Optional[User]:
    try:
        # mêmes règles que /auth/register (email valide, mot de passe 8..72)
        creds = RegisterIn(name=name, email=email, password=password)
    except ValidationError as e:
        fields = [err["loc"] for err in e.errors(include_input=False)]
        logger.warning("Invalid admin credentials for %s, skipping seed: %s", email, fields)
        return None

    repo = UserRepository(session)
    email = creds.email

    existing = repo.get_by_email(email)
    if existing:
        if not existing.is_admin:
            repo.update(existing, role=Role.ADMIN.value)
            logger.info("Promoted existing user id=%s to admin", existing.id)
        return existing

    if repo.email_taken(email):
        # compte supprimé : l'email reste réservé
        logger.warning("Admin email %s belongs to a deleted account, skipping seed", email)
        return None

    admin = repo.create(
        name=creds.name,
        email=email,
        hashed_password=hash_password(creds.password),
        role=Role.ADMIN.value,
    )
    logger.info("Seeded admin user id=%s email=%s", admin.id, admin.email)
    return admin
