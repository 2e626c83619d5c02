"""
➡️ But : Définir les formats d'entrée/sortie de l'API (couche validation).

UserUpdateIn → corps PUT /users/{id} (mise à jour partielle)

UserOut → réponse de l'API

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).
Empêche d'exposer par erreur le hash du mot de passe.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from restaurant_api.db.models.users import Role
from restaurant_api.features.schemas import PartialUpdateIn


class UserUpdateIn(PartialUpdateIn):
    name: Optional[str] = Field(None, min_length=2, max_length=100, examples=["Alice Martin"])
    email: Optional[EmailStr] = Field(None, examples=["alice@example.com"])
    password: Optional[str] = Field(None, min_length=8, max_length=72)
    # admin uniquement
    role: Optional[Role] = Field(None, examples=["user"])


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
