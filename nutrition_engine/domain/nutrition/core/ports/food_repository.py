"""IFoodRepository port - read access to the food catalog."""

from abc import ABC, abstractmethod
from typing import Iterable

from ..entities.food_item import FoodItem


class IFoodRepository(ABC):
    """Port for food catalog snapshots.

    The engine never writes foods; admin CRUD lives with the store.
    """

    @abstractmethod
    async def list_all(self) -> list[FoodItem]:
        """List every food in catalog insertion order.

        Returns:
            list[FoodItem]: Catalog snapshot
        """
        pass

    @abstractmethod
    async def find_by_ids(self, food_ids: Iterable[str]) -> dict[str, FoodItem]:
        """Resolve food ids.

        Args:
            food_ids: Identifiers to look up

        Returns:
            dict[str, FoodItem]: Found foods keyed by id; unknown ids are absent
        """
        pass
