"""ListPlansQuery - nutrition plans by target group."""

from dataclasses import dataclass
from typing import Optional, Union

from nutrition_engine.domain.meal_plan.core.entities.nutrition_plan import NutritionPlan
from nutrition_engine.domain.meal_plan.core.ports.plan_repository import IPlanRepository
from nutrition_engine.domain.meal_plan.core.value_objects.target_group import TargetGroup


@dataclass(frozen=True)
class ListPlansQuery:
    """Query for stored plans.

    Attributes:
        target_group: Only plans for this group (all groups when None)
        include_inactive: Also return deactivated plans (admin listing)
    """

    target_group: Optional[Union[TargetGroup, str]] = None
    include_inactive: bool = False


class ListPlansHandler:
    """Handler for ListPlansQuery."""

    def __init__(self, repository: IPlanRepository):
        self._repository = repository

    async def handle(self, query: ListPlansQuery) -> list[NutritionPlan]:
        """
        List plans in store order.

        Raises:
            InvalidInputError: If target_group is unknown
        """
        group = None
        if query.target_group is not None:
            group = TargetGroup.parse(query.target_group)

        plans = await self._repository.list_all()

        if not query.include_inactive:
            plans = [p for p in plans if p.is_active]
        if group is not None:
            plans = [p for p in plans if p.target_group == group]

        return plans
