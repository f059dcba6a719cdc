"""SavePlanCommand - persist a nutrition plan draft."""

from dataclasses import dataclass

import structlog

from nutrition_engine.domain.meal_plan.core.entities.nutrition_plan import NutritionPlan
from nutrition_engine.domain.meal_plan.core.ports.plan_repository import IPlanRepository
from nutrition_engine.domain.meal_plan.services.plan_editor import PlanEditor

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SavePlanCommand:
    """Command to create or update a nutrition plan.

    Attributes:
        plan: Draft from the plan builder (id set when updating)
    """

    plan: NutritionPlan


class SavePlanHandler:
    """Handler for SavePlanCommand.

    Saves a plan by:
    1. Cleaning, recomputing and validating the draft via PlanEditor
    2. Persisting the result

    Totals in the store are therefore always the same fold the editor
    showed, whatever totals the incoming draft carried.
    """

    def __init__(self, editor: PlanEditor, repository: IPlanRepository):
        self._editor = editor
        self._repository = repository

    async def handle(self, command: SavePlanCommand) -> NutritionPlan:
        """
        Handle plan save command.

        Returns:
            NutritionPlan: Stored plan

        Raises:
            InvalidPlanError: If the draft is incomplete
        """
        plan = self._editor.prepare_for_save(command.plan)
        saved = await self._repository.save(plan)

        logger.info(
            "Nutrition plan saved",
            plan_id=saved.id,
            meals=len(saved.meals),
            total_daily_calories=saved.total_daily_calories,
        )
        return saved
