"""Unit tests for PlanEditor."""

import pytest
from pydantic import ValidationError

from nutrition_engine.domain.meal_plan.core.entities.line_item import MealLineItem
from nutrition_engine.domain.meal_plan.core.entities.nutrition_plan import NutritionPlan
from nutrition_engine.domain.meal_plan.core.exceptions.domain_errors import InvalidPlanError
from nutrition_engine.domain.meal_plan.services.plan_editor import PlanEditor


class TestMealEditing:
    """Test meal-level edits."""

    def setup_method(self):
        self.editor = PlanEditor()
        self.draft = NutritionPlan.draft(name="Cut")

    def test_add_meal(self):
        plan = self.editor.add_meal(self.draft)

        assert len(plan.meals) == 2
        assert plan.meals[1].foods[0].is_blank()

    def test_add_meal_leaves_input_unchanged(self):
        self.editor.add_meal(self.draft)

        assert len(self.draft.meals) == 1

    def test_remove_meal(self, complete_plan):
        plan = self.editor.remove_meal(complete_plan, 0)

        assert [meal.name for meal in plan.meals] == ["Lunch"]
        assert plan.total_daily_calories == 248.0

    def test_remove_last_meal_leaves_empty_meal(self):
        plan = self.editor.remove_meal(self.draft, 0)

        assert len(plan.meals) == 1
        assert plan.meals[0].foods[0].is_blank()

    def test_remove_meal_out_of_range(self):
        with pytest.raises(InvalidPlanError):
            self.editor.remove_meal(self.draft, 3)

    def test_update_meal(self):
        plan = self.editor.update_meal(self.draft, 0, name="Breakfast", time="08:00")

        assert plan.meals[0].name == "Breakfast"
        assert plan.meals[0].time == "08:00"

    def test_update_meal_rejects_derived_fields(self):
        with pytest.raises(InvalidPlanError, match="total_calories"):
            self.editor.update_meal(self.draft, 0, total_calories="100")

    def test_update_meal_negative_index(self):
        with pytest.raises(InvalidPlanError):
            self.editor.update_meal(self.draft, -1, name="Snack")


class TestLineEditing:
    """Test line-item edits and their effect on totals."""

    def setup_method(self):
        self.editor = PlanEditor()
        self.draft = NutritionPlan.draft(name="Cut")

    def test_update_line_recomputes_totals(self):
        plan = self.editor.update_food_line(self.draft, 0, 0, name="Rice", calories=200)

        assert plan.meals[0].foods[0].name == "Rice"
        assert plan.meals[0].total_calories == 200.0
        assert plan.total_daily_calories == 200.0

    def test_update_line_in_second_meal(self):
        plan = self.editor.add_meal(self.draft)
        plan = self.editor.update_food_line(plan, 1, 0, name="Rice", calories=200)

        assert plan.total_daily_calories == 200.0

    def test_add_blank_line(self):
        plan = self.editor.add_food_line(self.draft, 0)

        assert len(plan.meals[0].foods) == 2
        assert plan.total_daily_calories == 0.0

    def test_add_line_from_food(self, chicken_breast):
        line = MealLineItem.from_food(chicken_breast, 150)

        plan = self.editor.add_food_line(self.draft, 0, line)

        assert plan.meals[0].foods[-1] == line
        assert plan.total_daily_calories == 248.0

    def test_remove_line(self, complete_plan):
        plan = self.editor.remove_food_line(complete_plan, 0, 1)

        assert [line.name for line in plan.meals[0].foods] == ["Oats"]
        assert plan.meals[0].total_calories == 195.0
        assert plan.total_daily_calories == 443.0

    def test_remove_last_line_leaves_blank_line(self, complete_plan):
        plan = self.editor.remove_food_line(complete_plan, 1, 0)

        assert len(plan.meals[1].foods) == 1
        assert plan.meals[1].foods[0].is_blank()
        assert plan.meals[1].total_calories == 0.0

    def test_remove_line_out_of_range(self, complete_plan):
        with pytest.raises(InvalidPlanError, match="line"):
            self.editor.remove_food_line(complete_plan, 0, 7)

    def test_update_line_rejects_unknown_field(self):
        with pytest.raises(InvalidPlanError):
            self.editor.update_food_line(self.draft, 0, 0, total_calories=500)

    def test_update_line_invalid_value(self):
        with pytest.raises(ValidationError):
            self.editor.update_food_line(self.draft, 0, 0, quantity_g=-5)

    def test_update_line_empty_value_becomes_zero(self, complete_plan):
        plan = self.editor.update_food_line(complete_plan, 0, 0, calories="")

        assert plan.meals[0].foods[0].calories == 0.0
        assert plan.meals[0].total_calories == 124.0

    def test_edit_sequence_keeps_fold(self, complete_plan):
        plan = self.editor.add_meal(complete_plan)
        plan = self.editor.update_food_line(plan, 2, 0, calories=150)
        plan = self.editor.add_food_line(plan, 2)
        plan = self.editor.update_food_line(plan, 2, 1, calories=50)
        plan = self.editor.remove_food_line(plan, 0, 0)

        lines = [line.calories for meal in plan.meals for line in meal.foods]
        assert plan.total_daily_calories == sum(lines) == 572.0


class TestPrepareForSave:
    """Test draft cleaning and validation."""

    def setup_method(self):
        self.editor = PlanEditor()

    def test_complete_plan(self, complete_plan):
        plan = self.editor.prepare_for_save(complete_plan)

        assert plan.total_daily_calories == 567.0

    def test_stale_totals_are_replaced(self, complete_plan):
        stale = complete_plan.model_copy(update={"total_daily_calories": 1.0})

        assert self.editor.prepare_for_save(stale).total_daily_calories == 567.0

    def test_blank_lines_dropped(self, complete_plan):
        draft = self.editor.add_food_line(complete_plan, 0)

        plan = self.editor.prepare_for_save(draft)

        assert len(plan.meals[0].foods) == 2

    def test_empty_draft_reports_every_problem(self):
        with pytest.raises(InvalidPlanError) as exc_info:
            self.editor.prepare_for_save(NutritionPlan.draft())

        assert exc_info.value.problems == [
            "Plan needs an English and an Arabic name",
            "Plan needs an Arabic description",
            "Meal 0 needs an English and an Arabic name",
            "Meal 0 needs a time",
            "Meal 0 needs at least one food",
        ]

    def test_plan_without_meals(self):
        plan = NutritionPlan(name="Plan", name_ar="خطة", description_ar="وصف")

        with pytest.raises(InvalidPlanError) as exc_info:
            self.editor.prepare_for_save(plan)

        assert exc_info.value.problems == ["Plan needs at least one meal"]

    def test_meal_with_only_blank_lines(self, complete_plan):
        draft = self.editor.add_meal(complete_plan)
        draft = self.editor.update_meal(draft, 2, name="Dinner", name_ar="عشاء", time="19:00")

        with pytest.raises(InvalidPlanError) as exc_info:
            self.editor.prepare_for_save(draft)

        assert exc_info.value.problems == ["Meal 2 needs at least one food"]

    def test_english_description_optional(self, complete_plan):
        plan = complete_plan.model_copy(update={"description": ""})

        assert self.editor.prepare_for_save(plan).description == ""
