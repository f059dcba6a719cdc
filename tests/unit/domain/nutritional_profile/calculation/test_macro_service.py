"""Unit tests for MacroService."""

import itertools
import math
from dataclasses import astuple

import pytest

from nutrition_engine.domain.nutritional_profile.calculation.macro_service import (
    MAX_GRAMS,
    MAX_KCAL,
    MacroService,
)
from nutrition_engine.domain.nutritional_profile.core.value_objects.macro_preferences import (
    FAT_PERCENT_CHOICES,
    MEALS_PER_DAY_CHOICES,
    PROTEIN_PER_KG_CHOICES,
)
from nutrition_engine.domain.shared.errors import InvalidInputError


class TestMacroService:
    """Test macro distribution."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = MacroService()

    def test_reference_split(self):
        """2259 kcal, 80kg, 2.0 g/kg protein, 25% fat."""
        macros = self.service.calculate(2259, 80.0, 2.0, 0.25)

        assert macros.calories == 2259
        assert macros.protein_g == 160  # 80 × 2.0
        assert macros.fat_g == 63  # 2259 × 0.25 / 9 = 62.75
        assert macros.carbs_g == 264  # (2259 - 640 - 564.75) / 4 = 263.56
        assert macros.protein_calories == 640
        assert macros.fat_calories == 565
        assert macros.carbs_calories == 1056  # 264 × 4

    def test_all_fields_are_ints(self):
        macros = self.service.calculate(2259, 80.0, 2.0, 0.25)

        assert all(isinstance(value, int) for value in astuple(macros))

    def test_carbs_calories_follow_rounded_grams(self):
        macros = self.service.calculate(2000, 70.0, 1.6, 0.30)

        assert macros.carbs_calories == macros.carbs_g * 4

    def test_carbs_floor_at_zero(self):
        """Protein and fat alone exceed the target."""
        macros = self.service.calculate(1000, 100.0, 2.2, 0.30)

        assert macros.protein_g == 220
        assert macros.carbs_g == 0
        assert macros.carbs_calories == 0

    def test_grams_clamped(self):
        macros = self.service.calculate(2_000_000, 80.0, 2.0, 0.25)

        assert macros.calories == MAX_KCAL
        assert macros.fat_g == MAX_GRAMS
        assert macros.carbs_g == MAX_GRAMS
        assert macros.carbs_calories == MAX_GRAMS * 4
        assert macros.protein_g == 160

    def test_protein_grams_clamped(self):
        macros = self.service.calculate(2500, 10_000.0, 2.0, 0.25)

        assert macros.protein_g == MAX_GRAMS

    def test_non_finite_calories_render_as_zero(self):
        macros = self.service.calculate(math.nan, 80.0, 2.0, 0.25)

        assert macros.calories == 0
        assert macros.fat_g == 0
        assert macros.carbs_g == 0
        assert macros.protein_g == 160

    @pytest.mark.parametrize("weight", [0.0, -5.0])
    def test_non_positive_weight_raises(self, weight: float):
        with pytest.raises(InvalidInputError):
            self.service.calculate(2259, weight, 2.0, 0.25)

    def test_higher_protein_lowers_carbs(self):
        low = self.service.calculate(2259, 80.0, 1.6, 0.25)
        high = self.service.calculate(2259, 80.0, 2.2, 0.25)

        assert high.protein_g > low.protein_g
        assert high.carbs_g < low.carbs_g
        assert high.fat_g == low.fat_g

    @pytest.mark.parametrize(
        "protein_per_kg,fat_percent",
        list(itertools.product(PROTEIN_PER_KG_CHOICES, FAT_PERCENT_CHOICES)),
    )
    def test_every_form_choice(self, protein_per_kg: float, fat_percent: float):
        """Each protein/fat form combination gives a consistent split."""
        macros = self.service.calculate(2259, 80.0, protein_per_kg, fat_percent)

        assert macros.carbs_g > 0
        assert macros.carbs_calories == macros.carbs_g * 4
        for meals in MEALS_PER_DAY_CHOICES:
            assert self.service.per_meal_share(macros, meals).calories > 0


class TestPerMealShare:
    """Test per-meal division."""

    def setup_method(self):
        self.service = MacroService()
        self.daily = self.service.calculate(2259, 80.0, 2.0, 0.25)

    def test_four_meals(self):
        share = self.service.per_meal_share(self.daily, 4)

        assert share.calories == 565  # 564.75
        assert share.protein_g == 40
        assert share.carbs_g == 66
        assert share.fat_g == 16  # 15.75
        assert share.protein_calories == 160
        assert share.carbs_calories == 264
        assert share.fat_calories == 141  # 141.25

    def test_three_meals(self):
        share = self.service.per_meal_share(self.daily, 3)

        assert share.calories == 753
        assert share.protein_g == 53  # 53.33
        assert share.carbs_g == 88
        assert share.fat_g == 21

    def test_single_meal_is_identity(self):
        assert self.service.per_meal_share(self.daily, 1) == self.daily

    def test_remainder_not_redistributed(self):
        share = self.service.per_meal_share(self.daily, 4)

        assert share.calories * 4 == 2260
        assert share.calories * 4 != self.daily.calories

    @pytest.mark.parametrize("meals", [0, -1])
    def test_non_positive_meals_raises(self, meals: int):
        with pytest.raises(InvalidInputError):
            self.service.per_meal_share(self.daily, meals)
