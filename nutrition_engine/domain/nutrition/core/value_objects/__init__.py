"""Value objects for the nutrition catalog."""

from .audience import SCORING_WEIGHTS, Audience, ScoringWeights
from .food_filters import FoodFilters
from .food_quantity import DEFAULT_QUANTITY_G, FoodQuantity
from .meal_totals import MealTotals

__all__ = [
    "Audience",
    "ScoringWeights",
    "SCORING_WEIGHTS",
    "FoodFilters",
    "FoodQuantity",
    "DEFAULT_QUANTITY_G",
    "MealTotals",
]
