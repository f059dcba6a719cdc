"""IPlanRepository port - nutrition plan persistence."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.nutrition_plan import NutritionPlan


class IPlanRepository(ABC):
    """Port for nutrition plan persistence.

    Implementations store what they are given; totals must already be
    recomputed by the caller (see SavePlanHandler).
    """

    @abstractmethod
    async def save(self, plan: NutritionPlan) -> NutritionPlan:
        """Save plan (create or update).

        Args:
            plan: Plan to save; a plan without id is created

        Returns:
            NutritionPlan: Stored plan, with its id assigned
        """
        pass

    @abstractmethod
    async def find_by_id(self, plan_id: str) -> Optional[NutritionPlan]:
        """Find plan by ID.

        Args:
            plan_id: Plan identifier

        Returns:
            Optional[NutritionPlan]: Plan if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[NutritionPlan]:
        """List every stored plan, active or not, in insertion order."""
        pass
