"""PlanEditor - structural edits on a plan draft."""

from typing import Any, Optional

import structlog

from ..core.entities.line_item import MealLineItem
from ..core.entities.nutrition_plan import Meal, NutritionPlan
from ..core.exceptions.domain_errors import InvalidPlanError
from .totals_service import PlanTotalsService

logger = structlog.get_logger(__name__)

EDITABLE_MEAL_FIELDS = frozenset({"name", "name_ar", "time"})
EDITABLE_LINE_FIELDS = frozenset(MealLineItem.model_fields)


class PlanEditor:
    """
    Edit a caller-held plan draft.

    Every operation returns a new plan whose meal and daily totals have
    been recomputed, so the draft never shows a stale total. Drafts always
    keep at least one meal, and every meal at least one line; removing the
    last one leaves an empty placeholder instead.

    Example:
        >>> editor = PlanEditor()
        >>> plan = editor.add_meal(NutritionPlan.draft(name="Cut"))
        >>> plan = editor.update_food_line(plan, 1, 0, name="Rice", calories=200)
        >>> plan.total_daily_calories
        200.0
    """

    def __init__(self, totals_service: Optional[PlanTotalsService] = None) -> None:
        self._totals = totals_service or PlanTotalsService()

    # ─────────────────────────────────────────────────────────
    # Meals
    # ─────────────────────────────────────────────────────────

    def add_meal(self, plan: NutritionPlan) -> NutritionPlan:
        """Append an empty meal."""
        return self._with_meals(plan, (*plan.meals, Meal.empty()))

    def remove_meal(self, plan: NutritionPlan, meal_index: int) -> NutritionPlan:
        """Remove the meal at meal_index."""
        self._meal_at(plan, meal_index)
        meals = tuple(m for i, m in enumerate(plan.meals) if i != meal_index)
        return self._with_meals(plan, meals or (Meal.empty(),))

    def update_meal(
        self, plan: NutritionPlan, meal_index: int, **fields: str
    ) -> NutritionPlan:
        """Set name, name_ar or time of the meal at meal_index."""
        unknown = set(fields) - EDITABLE_MEAL_FIELDS
        if unknown:
            raise InvalidPlanError(
                [f"Meal field cannot be edited: {name}" for name in sorted(unknown)]
            )

        meal = self._meal_at(plan, meal_index)
        updated = Meal(**{**meal.model_dump(), **fields})
        return self._replace_meal(plan, meal_index, updated)

    # ─────────────────────────────────────────────────────────
    # Line items
    # ─────────────────────────────────────────────────────────

    def add_food_line(
        self,
        plan: NutritionPlan,
        meal_index: int,
        line: Optional[MealLineItem] = None,
    ) -> NutritionPlan:
        """Append line (blank when omitted) to the meal at meal_index."""
        meal = self._meal_at(plan, meal_index)
        foods = (*meal.foods, line or MealLineItem())
        return self._replace_meal(plan, meal_index, meal.model_copy(update={"foods": foods}))

    def remove_food_line(
        self, plan: NutritionPlan, meal_index: int, line_index: int
    ) -> NutritionPlan:
        """Remove one line from the meal at meal_index."""
        meal = self._meal_at(plan, meal_index)
        self._line_at(meal, meal_index, line_index)
        foods = tuple(f for j, f in enumerate(meal.foods) if j != line_index)
        foods = foods or (MealLineItem(),)
        return self._replace_meal(plan, meal_index, meal.model_copy(update={"foods": foods}))

    def update_food_line(
        self,
        plan: NutritionPlan,
        meal_index: int,
        line_index: int,
        **fields: Any,
    ) -> NutritionPlan:
        """Set fields of one line (name, quantity_g, calories, ...)."""
        unknown = set(fields) - EDITABLE_LINE_FIELDS
        if unknown:
            raise InvalidPlanError(
                [f"Line field cannot be edited: {name}" for name in sorted(unknown)]
            )

        meal = self._meal_at(plan, meal_index)
        line = self._line_at(meal, meal_index, line_index)
        updated = MealLineItem(**{**line.model_dump(), **fields})
        foods = tuple(updated if j == line_index else f for j, f in enumerate(meal.foods))
        return self._replace_meal(plan, meal_index, meal.model_copy(update={"foods": foods}))

    # ─────────────────────────────────────────────────────────
    # Save preparation
    # ─────────────────────────────────────────────────────────

    def prepare_for_save(self, plan: NutritionPlan) -> NutritionPlan:
        """
        Clean and validate a draft before it is persisted.

        Blank lines are dropped and totals recomputed, then the plan is
        checked: English and Arabic names, an Arabic description, at least
        one meal, and for every meal both names, a time and one line.

        Returns:
            NutritionPlan: Cleaned plan with fresh totals

        Raises:
            InvalidPlanError: With every problem found
        """
        meals = tuple(
            meal.model_copy(
                update={"foods": tuple(f for f in meal.foods if not f.is_blank())}
            )
            for meal in plan.meals
        )
        cleaned = self._totals.recompute_plan(plan.model_copy(update={"meals": meals}))

        problems = []
        if not cleaned.name or not cleaned.name_ar:
            problems.append("Plan needs an English and an Arabic name")
        if not cleaned.description_ar:
            problems.append("Plan needs an Arabic description")
        if not cleaned.meals:
            problems.append("Plan needs at least one meal")

        for i, meal in enumerate(cleaned.meals):
            if not meal.name or not meal.name_ar:
                problems.append(f"Meal {i} needs an English and an Arabic name")
            if not meal.time:
                problems.append(f"Meal {i} needs a time")
            if not meal.foods:
                problems.append(f"Meal {i} needs at least one food")

        if problems:
            logger.debug("Plan draft rejected", problems=len(problems))
            raise InvalidPlanError(problems)

        return cleaned

    # ─────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────

    def _with_meals(self, plan: NutritionPlan, meals: tuple[Meal, ...]) -> NutritionPlan:
        return self._totals.recompute_plan(plan.model_copy(update={"meals": meals}))

    def _replace_meal(
        self, plan: NutritionPlan, meal_index: int, meal: Meal
    ) -> NutritionPlan:
        meals = tuple(meal if i == meal_index else m for i, m in enumerate(plan.meals))
        return self._with_meals(plan, meals)

    @staticmethod
    def _meal_at(plan: NutritionPlan, meal_index: int) -> Meal:
        if not 0 <= meal_index < len(plan.meals):
            raise InvalidPlanError([f"No meal at index {meal_index}"])
        return plan.meals[meal_index]

    @staticmethod
    def _line_at(meal: Meal, meal_index: int, line_index: int) -> MealLineItem:
        if not 0 <= line_index < len(meal.foods):
            raise InvalidPlanError(
                [f"No food line at index {line_index} in meal {meal_index}"]
            )
        return meal.foods[line_index]
