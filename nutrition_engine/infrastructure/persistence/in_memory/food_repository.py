"""In-memory implementation of IFoodRepository for testing."""

from typing import Iterable, Optional

from nutrition_engine.domain.nutrition.core.entities.food_item import FoodItem
from nutrition_engine.domain.nutrition.core.ports.food_repository import IFoodRepository


class InMemoryFoodRepository(IFoodRepository):
    """
    In-memory food catalog.

    Keeps foods in insertion order. FoodItem is immutable, so stored
    items are handed out as-is.
    """

    def __init__(self, foods: Optional[Iterable[FoodItem]] = None) -> None:
        """Initialize repository, optionally seeded with foods."""
        self._foods: dict[str, FoodItem] = {}
        for food in foods or ():
            self.add(food)

    def add(self, food: FoodItem) -> None:
        """Add or replace a food; a replaced food keeps its position."""
        self._foods[food.id] = food

    async def list_all(self) -> list[FoodItem]:
        """List every food in insertion order."""
        return list(self._foods.values())

    async def find_by_ids(self, food_ids: Iterable[str]) -> dict[str, FoodItem]:
        """Resolve the given ids; unknown ids are left out."""
        return {fid: self._foods[fid] for fid in food_ids if fid in self._foods}

    def clear(self) -> None:
        """
        Clear all foods from memory.

        Useful for test cleanup.
        """
        self._foods.clear()

    def count(self) -> int:
        """Get total number of foods in memory."""
        return len(self._foods)
