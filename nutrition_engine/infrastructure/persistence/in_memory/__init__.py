"""In-memory repository implementations."""

from .food_repository import InMemoryFoodRepository
from .plan_repository import InMemoryPlanRepository

__all__ = ["InMemoryFoodRepository", "InMemoryPlanRepository"]
