from datetime import datetime, timezone
from typing import Any, Generic, Optional, Type, TypeVar
from sqlmodel import Session, select

from restaurant_api.db.models.base import BaseModelDB

# Type générique pour le modèle (User, Restaurant)
ModelT = TypeVar("ModelT", bound=BaseModelDB)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, soft_delete.
    👉 Les lignes marquées deleted_at sont invisibles pour toutes les lectures.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def _active(self):
        """SELECT de base restreint aux lignes non supprimées."""
        return select(self.model).where(self.model.deleted_at.is_(None))

    # ---------- READ ----------

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement actif par son identifiant, ou None."""
        entity = self.session.get(self.model, id_)
        if entity is None or entity.deleted_at is not None:
            return None
        return entity

    # ---------- CREATE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        """
        Crée et persiste un nouvel enregistrement.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        entity = self.model(**fields)
        self.session.add(entity)
        if commit:
            self.session.commit()
            self.session.refresh(entity)
        else:
            # flush pour obtenir l'ID sans commit (utile pour FKs)
            self.session.flush()
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """
        Met à jour un enregistrement existant (updated_at rafraîchi automatiquement).
        """
        for key, value in changes.items():
            setattr(entity, key, value)
        entity.updated_at = datetime.now(timezone.utc)
        self.session.add(entity)
        if commit:
            self.session.commit()
            self.session.refresh(entity)
        else:
            self.session.flush()
        return entity

    # ---------- DELETE ----------

    def soft_delete(self, entity: ModelT, *, commit: bool = True) -> None:
        """
        Marque un enregistrement comme supprimé (la ligne reste en base).
        """
        now = datetime.now(timezone.utc)
        entity.deleted_at = now
        entity.updated_at = now
        self.session.add(entity)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
