from datetime import datetime, timezone
from typing import Sequence

from restaurant_api.db.repositories.base import BaseRepository
from restaurant_api.db.models.restaurants import Restaurant

class RestaurantRepository(BaseRepository[Restaurant]):
    model = Restaurant

    def list_by_owner(self, user_id: int, *, offset: int = 0, limit: int = 100) -> Sequence[Restaurant]:
        statement = (
            self._active()
            .where(self.model.user_id == user_id)
            .order_by(self.model.id)
            .offset(offset)
            .limit(limit)
        )
        return self.session.exec(statement).all()

    def soft_delete_by_owner(self, user_id: int, *, commit: bool = True) -> int:
        """Supprime (logiquement) tous les restaurants d'un utilisateur."""
        restaurants = self.session.exec(
            self._active().where(self.model.user_id == user_id)
        ).all()
        now = datetime.now(timezone.utc)
        for restaurant in restaurants:
            restaurant.deleted_at = now
            restaurant.updated_at = now
            self.session.add(restaurant)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        return len(restaurants)
