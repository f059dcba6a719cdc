"""CalculateMealNutritionQuery - totals for the meal builder selection."""

from dataclasses import dataclass
from typing import Sequence

from nutrition_engine.domain.nutrition.core.ports.food_repository import IFoodRepository
from nutrition_engine.domain.nutrition.core.value_objects.food_quantity import FoodQuantity
from nutrition_engine.domain.nutrition.core.value_objects.meal_totals import MealTotals
from nutrition_engine.domain.nutrition.services.meal_nutrition_service import (
    MealNutritionService,
)


@dataclass(frozen=True)
class CalculateMealNutritionQuery:
    """Query for meal builder totals.

    Attributes:
        items: Selected foods with quantities
    """

    items: Sequence[FoodQuantity]


class CalculateMealNutritionHandler:
    """Handler for CalculateMealNutritionQuery.

    Resolves the referenced foods from the catalog and delegates to
    MealNutritionService; foods no longer in the catalog are skipped.
    """

    def __init__(self, repository: IFoodRepository, nutrition_service: MealNutritionService):
        self._repository = repository
        self._nutrition_service = nutrition_service

    async def handle(self, query: CalculateMealNutritionQuery) -> MealTotals:
        """Calculate totals for the selection."""
        if not query.items:
            return MealTotals()

        catalog = await self._repository.find_by_ids({item.food_id for item in query.items})
        return self._nutrition_service.calculate(query.items, catalog)
