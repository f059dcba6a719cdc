"""CalorieTargetService - goal-adjusted daily calorie target."""

from typing import Union

from ...shared.rounding import round_half_up
from ..core.ports.calculators import ICalorieTargetCalculator
from ..core.value_objects.goal import Goal
from ..core.value_objects.tdee import TDEE


class CalorieTargetService(ICalorieTargetCalculator):
    """Derive the daily calorie target from maintenance calories and goal.

    The result is rounded half-up exactly once, here. Everything
    downstream (macro split, per-meal share) receives this integer.

    No minimum is enforced: a maintenance value under 500 kcal yields a
    negative cut target. Callers are expected to validate body metrics
    upstream.
    """

    def calculate(
        self, maintenance: Union[TDEE, float], goal: Union[Goal, str]
    ) -> int:
        """Calculate the calorie target.

        Args:
            maintenance: Maintenance calories (TDEE or plain kcal value)
            goal: Nutritional goal (enum or its value)

        Returns:
            int: Daily calorie target in kcal

        Raises:
            InvalidInputError: If goal is not cut, maintain or bulk

        Example:
            >>> CalorieTargetService().calculate(TDEE(2759.0, 1.55), Goal.CUT)
            2259
        """
        parsed = Goal.parse(goal)
        value = maintenance.value if isinstance(maintenance, TDEE) else maintenance
        return round_half_up(value + parsed.calorie_offset())
