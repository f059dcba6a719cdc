"""MacroService - Macronutrient distribution calculation."""

from dataclasses import fields

from ...shared.errors import InvalidInputError
from ...shared.rounding import clamp, finite_or_zero, round_half_up
from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_breakdown import MacroBreakdown

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

# Display sanity bounds; values outside are clamped, never reported.
MAX_GRAMS = 9999
MAX_KCAL = 999999


def _grams(value: float) -> int:
    return round_half_up(clamp(finite_or_zero(value), 0, MAX_GRAMS))


def _kcal(value: float) -> int:
    return round_half_up(clamp(finite_or_zero(value), 0, MAX_KCAL))


class MacroService(IMacroCalculator):
    """Split a calorie target into protein, carbohydrates and fat.

    Strategy:
        - Protein: body weight × protein_per_kg
        - Fat: fat_percent of total calories
        - Carbs: remaining calories

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g

    Every output is clamped to [0, 9999] g or [0, 999999] kcal and rounded
    half-up. When protein and fat already exceed the target, carbs floor
    at 0 instead of going negative.
    """

    def calculate(
        self,
        calories: float,
        weight_kg: float,
        protein_per_kg: float,
        fat_percent: float,
    ) -> MacroBreakdown:
        """Calculate macro distribution.

        Args:
            calories: Daily calorie target
            weight_kg: Body weight in kg
            protein_per_kg: Protein grams per kg body weight
            fat_percent: Share of calories from fat (0-1)

        Returns:
            MacroBreakdown: Protein/carbs/fat in grams and calories

        Raises:
            InvalidInputError: If weight_kg is not positive

        Example:
            >>> split = MacroService().calculate(2259, 80.0, 2.0, 0.25)
            >>> split.protein_g
            160  # 80kg × 2.0
            >>> split.fat_g
            63   # 2259 × 0.25 / 9 = 62.75
            >>> split.carbs_g
            264  # (2259 - 640 - 564.75) / 4 = 263.56
        """
        if weight_kg <= 0:
            raise InvalidInputError(f"Weight must be positive, got {weight_kg}")

        # 1. Protein (weight-based)
        protein_g = weight_kg * protein_per_kg
        protein_cal = protein_g * PROTEIN_KCAL_PER_G

        # 2. Fat (share of calories)
        fat_cal = calories * fat_percent
        fat_g = fat_cal / FAT_KCAL_PER_G

        # 3. Carbs (remaining calories)
        remaining_cal = calories - (protein_cal + fat_cal)
        carbs_g = _grams(remaining_cal / CARBS_KCAL_PER_G)

        return MacroBreakdown(
            calories=_kcal(calories),
            protein_g=_grams(protein_g),
            carbs_g=carbs_g,
            fat_g=_grams(fat_g),
            protein_calories=_kcal(protein_cal),
            carbs_calories=_kcal(carbs_g * CARBS_KCAL_PER_G),
            fat_calories=_kcal(fat_cal),
        )

    def per_meal_share(
        self, macros: MacroBreakdown, meals_per_day: int
    ) -> MacroBreakdown:
        """Divide a daily breakdown evenly across meals.

        Each figure is divided and rounded on its own; the rounding
        remainder is not redistributed, so meals may not add back up to
        the daily total exactly.

        Args:
            macros: Daily macro breakdown
            meals_per_day: Number of meals

        Returns:
            MacroBreakdown: Per-meal figures

        Raises:
            InvalidInputError: If meals_per_day is not positive

        Example:
            >>> daily = MacroService().calculate(2259, 80.0, 2.0, 0.25)
            >>> MacroService().per_meal_share(daily, 4).calories
            565
        """
        if meals_per_day <= 0:
            raise InvalidInputError(
                f"Meals per day must be positive, got {meals_per_day}"
            )

        shares = {
            f.name: round_half_up(
                finite_or_zero(getattr(macros, f.name) / meals_per_day)
            )
            for f in fields(MacroBreakdown)
        }
        return MacroBreakdown(**shares)
