"""In-memory implementation of IPlanRepository for testing."""

from copy import deepcopy
from typing import Optional
from uuid import uuid4

from nutrition_engine.domain.meal_plan.core.entities.nutrition_plan import NutritionPlan
from nutrition_engine.domain.meal_plan.core.ports.plan_repository import IPlanRepository


class InMemoryPlanRepository(IPlanRepository):
    """
    In-memory implementation of plan repository.

    Uses a dictionary to store plans in memory. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._plans: dict[str, NutritionPlan] = {}

    async def save(self, plan: NutritionPlan) -> NutritionPlan:
        """
        Save or update plan in memory.

        Plans without id get a new UUID. Updating keeps the plan's
        position in listings.

        Args:
            plan: Plan to save

        Returns:
            Stored plan with its id
        """
        if plan.id is None:
            plan = plan.model_copy(update={"id": str(uuid4())})

        self._plans[plan.id] = deepcopy(plan)
        return deepcopy(plan)

    async def find_by_id(self, plan_id: str) -> Optional[NutritionPlan]:
        """
        Find plan by ID.

        Args:
            plan_id: Plan ID to search for

        Returns:
            Deep copy of plan if found, None otherwise
        """
        plan = self._plans.get(plan_id)
        return deepcopy(plan) if plan else None

    async def list_all(self) -> list[NutritionPlan]:
        """List every plan in insertion order."""
        return [deepcopy(plan) for plan in self._plans.values()]

    def clear(self) -> None:
        """
        Clear all plans from memory.

        Useful for test cleanup.
        """
        self._plans.clear()

    def count(self) -> int:
        """
        Get total number of plans in memory.

        Returns:
            Number of plans
        """
        return len(self._plans)
