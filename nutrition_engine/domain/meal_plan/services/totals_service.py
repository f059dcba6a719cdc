"""PlanTotalsService - fold line-item calories into meal and plan totals."""

from ..core.entities.nutrition_plan import Meal, NutritionPlan


class PlanTotalsService:
    """Recompute derived calorie totals of a plan.

    Totals are always a pure fold over the current line items, never a
    running accumulator: meal total = sum of line calories, plan total =
    sum of meal totals. Line items already carry denormalised calories,
    so nothing is re-derived from catalog foods here.

    Both the plan editor and the save path call this same routine, so a
    draft shown to the user and the stored plan cannot disagree.
    """

    def recompute_meal(self, meal: Meal) -> Meal:
        """Return meal with total_calories recomputed from its lines.

        Example:
            >>> meal = Meal(foods=(MealLineItem(calories=300),
            ...                    MealLineItem(calories=150)))
            >>> PlanTotalsService().recompute_meal(meal).total_calories
            450.0
        """
        total = sum(line.calories for line in meal.foods)
        return meal.model_copy(update={"total_calories": float(total)})

    def recompute_plan(self, plan: NutritionPlan) -> NutritionPlan:
        """Return plan with every meal total and the daily total recomputed."""
        meals = tuple(self.recompute_meal(meal) for meal in plan.meals)
        total = sum(meal.total_calories for meal in meals)
        return plan.model_copy(
            update={"meals": meals, "total_daily_calories": float(total)}
        )
