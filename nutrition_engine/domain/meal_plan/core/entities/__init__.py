"""Entities for nutrition plans."""

from .line_item import MealLineItem
from .nutrition_plan import Meal, NutritionPlan

__all__ = ["MealLineItem", "Meal", "NutritionPlan"]
