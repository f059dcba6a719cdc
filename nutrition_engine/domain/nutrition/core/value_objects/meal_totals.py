"""MealTotals value object - nutrition of a built meal."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MealTotals:
    """Aggregated nutrition for a list of foods and quantities.

    Calories are whole kcal; macros keep one decimal of precision.

    Attributes:
        calories: Total energy in kcal
        protein: Total protein in g
        carbs: Total carbohydrates in g
        fat: Total fat in g
    """

    calories: int = 0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
