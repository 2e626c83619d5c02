import logging
from typing import Sequence

from restaurant_api.core.errors import NotFoundError
from restaurant_api.db.models.restaurants import Restaurant
from restaurant_api.db.repositories.restaurants import RestaurantRepository
from restaurant_api.db.repositories.users import UserRepository
from restaurant_api.features.restaurants.schemas import RestaurantCreateIn, RestaurantUpdateIn
from restaurant_api.security.policy import Principal, ensure_can_act_on

logger = logging.getLogger(__name__)


class RestaurantService:
    """
    Logique métier / contrôles d'accès pour Restaurant.
    - Owner : CRUD sur ses restaurants.
    - Admin : CRUD sur tous les restaurants.
    - Le propriétaire d'un nouveau restaurant est toujours le principal courant.
    """

    def __init__(self, repo: RestaurantRepository, user_repo: UserRepository):
        self.repo = repo
        self.user_repo = user_repo

    # -------- Helpers --------

    def _ensure_user_exists(self, user_id: int) -> None:
        if not self.user_repo.get(user_id):
            raise NotFoundError("User not found", "The requested user does not exist")

    def _get_or_404(self, restaurant_id: int) -> Restaurant:
        restaurant = self.repo.get(restaurant_id)
        if not restaurant:
            raise NotFoundError("Restaurant not found", "The requested restaurant does not exist")
        return restaurant

    # -------- Reads --------

    def list_for_user(
        self,
        principal: Principal,
        user_id: int,
        *,
        offset: int = 0,
        limit: int = 100,
    ) -> Sequence[Restaurant]:
        self._ensure_user_exists(user_id)
        ensure_can_act_on(principal, user_id)
        return self.repo.list_by_owner(user_id, offset=offset, limit=limit)

    def get_for_user(self, principal: Principal, user_id: int, restaurant_id: int) -> Restaurant:
        self._ensure_user_exists(user_id)
        restaurant = self._get_or_404(restaurant_id)
        # un restaurant d'un autre utilisateur n'existe pas sous ce chemin
        if restaurant.user_id != user_id:
            raise NotFoundError("Restaurant not found", "The requested restaurant does not exist")
        ensure_can_act_on(principal, restaurant.user_id)
        return restaurant

    # -------- Writes --------

    def create(self, principal: Principal, payload: RestaurantCreateIn) -> Restaurant:
        self._ensure_user_exists(principal.id)
        restaurant = self.repo.create(
            name=payload.name,
            description=payload.description,
            address=payload.address,
            phone=payload.phone,
            user_id=principal.id,
        )
        logger.info("Restaurant created id=%s user_id=%s", restaurant.id, restaurant.user_id)
        return restaurant

    def update(self, principal: Principal, restaurant_id: int, payload: RestaurantUpdateIn) -> Restaurant:
        restaurant = self._get_or_404(restaurant_id)
        ensure_can_act_on(principal, restaurant.user_id, detail="You don't have permission to update this restaurant")

        changes = payload.get_update_data()
        if not changes:
            return restaurant
        return self.repo.update(restaurant, **changes)

    def delete(self, principal: Principal, restaurant_id: int) -> None:
        restaurant = self._get_or_404(restaurant_id)
        ensure_can_act_on(principal, restaurant.user_id, detail="You don't have permission to delete this restaurant")
        self.repo.soft_delete(restaurant)
        logger.info("Restaurant deleted id=%s by=%s", restaurant.id, principal.id)
