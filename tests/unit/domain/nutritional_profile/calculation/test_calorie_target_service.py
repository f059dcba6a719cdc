"""Unit tests for CalorieTargetService."""

import pytest

from nutrition_engine.domain.nutritional_profile.calculation.calorie_target_service import (
    CalorieTargetService,
)
from nutrition_engine.domain.nutritional_profile.core.value_objects import TDEE, Goal
from nutrition_engine.domain.shared.errors import InvalidInputError


class TestCalorieTargetService:
    """Test goal-adjusted calorie targets."""

    def setup_method(self):
        self.service = CalorieTargetService()
        self.maintenance = TDEE(value=2759.0, activity_factor=1.55)

    @pytest.mark.parametrize(
        "goal,expected",
        [(Goal.CUT, 2259), (Goal.MAINTAIN, 2759), (Goal.BULK, 3259)],
    )
    def test_goal_offsets(self, goal: Goal, expected: int):
        assert self.service.calculate(self.maintenance, goal) == expected

    def test_accepts_goal_string(self):
        assert self.service.calculate(self.maintenance, "cut") == 2259

    def test_accepts_plain_value(self):
        assert self.service.calculate(2759.0, Goal.BULK) == 3259

    def test_returns_int(self):
        assert isinstance(self.service.calculate(self.maintenance, Goal.MAINTAIN), int)

    @pytest.mark.parametrize(
        "value,expected",
        [(2000.5, 2001), (1999.5, 2000), (2000.49, 2000)],
    )
    def test_rounds_half_up(self, value: float, expected: int):
        maintenance = TDEE(value=value, activity_factor=1.2)

        assert self.service.calculate(maintenance, Goal.MAINTAIN) == expected

    def test_ordering_across_goals(self):
        cut = self.service.calculate(self.maintenance, Goal.CUT)
        maintain = self.service.calculate(self.maintenance, Goal.MAINTAIN)
        bulk = self.service.calculate(self.maintenance, Goal.BULK)

        assert cut < maintain < bulk

    def test_no_floor_on_cut(self):
        """A cut below 500 kcal maintenance goes negative."""
        maintenance = TDEE(value=300.0, activity_factor=1.2)

        assert self.service.calculate(maintenance, Goal.CUT) == -200

    def test_unknown_goal_raises(self):
        with pytest.raises(InvalidInputError):
            self.service.calculate(self.maintenance, "recomp")
