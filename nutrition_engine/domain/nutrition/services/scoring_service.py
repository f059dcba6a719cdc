"""FoodScoringService - audience-specific suitability score."""

from typing import Union

from ..core.entities.food_item import FoodItem
from ..core.value_objects.audience import Audience


class FoodScoringService:
    """Score a food for an audience with a fixed linear heuristic.

    Coefficients per audience (per-100 g values):
        diabetic: fiber×3 + protein×1.5 - sugar×4 - carbs×0.7 - fat×0.1
        senior:   protein×3 + fiber×1.2 - carbs×0.6 - sodium×0.01
        child:    protein×2 + fiber×1 - sugar×3 - carbs×0.2
        general:  protein×2 + fiber×2 - sugar×2 - carbs×0.2 - fat×0.05
    """

    def score(self, food: FoodItem, audience: Union[Audience, str]) -> float:
        """Calculate the suitability score of food.

        Args:
            food: Catalog food
            audience: Target audience (enum or its value)

        Returns:
            float: Higher is more suitable

        Raises:
            InvalidInputError: If audience is unknown

        Example:
            >>> food = FoodItem(id="f1", calories=150, protein=10, carbs=20,
            ...                 fat=5, fiber=4, sugar=2)
            >>> round(FoodScoringService().score(food, "diabetic"), 2)
            4.5
        """
        w = Audience.parse(audience).weights()
        return (
            food.protein * w.protein
            + food.carbs * w.carbs
            + food.fat * w.fat
            + food.fiber * w.fiber
            + food.sugar * w.sugar
            + food.sodium * w.sodium
        )
