"""
➡️ But : Schémas partagés par plusieurs features.
"""

from typing import Any

from pydantic import BaseModel, field_validator


class MessageOut(BaseModel):
    message: str


class PartialUpdateIn(BaseModel):
    """
    Base des corps PUT à mise à jour partielle :
    une chaîne vide (ou blanche) équivaut à un champ non fourni.
    """

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def get_update_data(self) -> dict:
        """Retourne uniquement les champs fournis (non None)."""
        return {k: v for k, v in self.model_dump().items() if v is not None}
