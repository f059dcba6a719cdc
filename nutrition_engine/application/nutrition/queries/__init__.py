"""Nutrition catalog queries."""

from .calculate_meal_nutrition import CalculateMealNutritionHandler, CalculateMealNutritionQuery
from .rank_foods import RankFoodsHandler, RankFoodsQuery

__all__ = [
    "RankFoodsQuery",
    "RankFoodsHandler",
    "CalculateMealNutritionQuery",
    "CalculateMealNutritionHandler",
]
