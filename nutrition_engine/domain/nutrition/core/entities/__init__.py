"""Entities for the nutrition catalog."""

from .food_item import FoodItem, MealType, ScaledNutrients

__all__ = ["FoodItem", "MealType", "ScaledNutrients"]
