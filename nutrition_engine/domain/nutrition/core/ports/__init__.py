"""Ports for the nutrition catalog."""

from .food_repository import IFoodRepository

__all__ = ["IFoodRepository"]
