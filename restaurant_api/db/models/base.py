"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel.

Ici on représente les propriétés communes de toutes les tables :
identifiant, horodatage et marqueur de suppression logique (deleted_at).
"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    # soft-delete : une ligne avec deleted_at renseigné n'existe plus pour l'API
    deleted_at: Optional[datetime] = Field(default=None, index=True)
