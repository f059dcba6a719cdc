"""MealNutritionService - totals for a list of foods and quantities."""

from typing import Iterable, Mapping

import structlog

from ...shared.rounding import round_half_up, round_to_tenth
from ..core.entities.food_item import FoodItem
from ..core.value_objects.food_quantity import FoodQuantity
from ..core.value_objects.meal_totals import MealTotals

logger = structlog.get_logger(__name__)


class MealNutritionService:
    """Aggregate nutrition for the meal builder.

    Each selected food's per-100 g profile is scaled to its quantity and
    summed. References to foods missing from the catalog are skipped, so a
    stale selection still produces totals for what can be resolved.
    """

    def calculate(
        self,
        items: Iterable[FoodQuantity],
        catalog: Mapping[str, FoodItem],
    ) -> MealTotals:
        """Calculate meal totals.

        Args:
            items: Selected foods with quantities
            catalog: Foods keyed by id

        Returns:
            MealTotals: Calories rounded to whole kcal, macros to one decimal

        Example:
            >>> chicken = FoodItem(id="chicken", calories=165, protein=31.0,
            ...                    carbs=0.0, fat=3.6)
            >>> totals = MealNutritionService().calculate(
            ...     [FoodQuantity(food_id="chicken", quantity_g=150)],
            ...     {"chicken": chicken},
            ... )
            >>> totals.calories, totals.protein
            (248, 46.5)
        """
        calories = protein = carbs = fat = 0.0
        skipped = 0

        for item in items:
            food = catalog.get(item.food_id)
            if food is None:
                skipped += 1
                continue

            scaled = food.scale(item.quantity_g)
            calories += scaled.calories
            protein += scaled.protein
            carbs += scaled.carbs
            fat += scaled.fat

        if skipped:
            logger.debug("Skipped unknown foods in meal", skipped=skipped)

        return MealTotals(
            calories=round_half_up(calories),
            protein=round_to_tenth(protein),
            carbs=round_to_tenth(carbs),
            fat=round_to_tenth(fat),
        )
