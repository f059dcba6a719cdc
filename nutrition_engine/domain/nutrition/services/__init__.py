"""Nutrition catalog services."""

from .meal_nutrition_service import MealNutritionService
from .ranking_service import FoodRankingService
from .scoring_service import FoodScoringService

__all__ = [
    "FoodScoringService",
    "FoodRankingService",
    "MealNutritionService",
]
