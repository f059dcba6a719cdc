"""ProfileOrchestrator - coordinates energy and macro calculation services."""

from dataclasses import dataclass
from typing import Optional, Union

from nutrition_engine.domain.nutritional_profile.calculation.bmr_service import BMRService
from nutrition_engine.domain.nutritional_profile.calculation.calorie_target_service import (
    CalorieTargetService,
)
from nutrition_engine.domain.nutritional_profile.calculation.macro_service import MacroService
from nutrition_engine.domain.nutritional_profile.calculation.tdee_service import TDEEService
from nutrition_engine.domain.nutritional_profile.core.value_objects.bmr import BMR
from nutrition_engine.domain.nutritional_profile.core.value_objects.goal import Goal
from nutrition_engine.domain.nutritional_profile.core.value_objects.macro_breakdown import (
    MacroBreakdown,
)
from nutrition_engine.domain.nutritional_profile.core.value_objects.macro_preferences import (
    MacroPreferences,
)
from nutrition_engine.domain.nutritional_profile.core.value_objects.person_metrics import (
    PersonMetrics,
)
from nutrition_engine.domain.nutritional_profile.core.value_objects.tdee import TDEE
from nutrition_engine.domain.shared.rounding import round_half_up


@dataclass(frozen=True)
class ProfileCalculations:
    """Result of the full calculator chain."""

    bmr: BMR
    maintenance: TDEE
    target_calories: int
    macros: MacroBreakdown
    per_meal: MacroBreakdown


@dataclass(frozen=True)
class DailyCalorieNeeds:
    """Rounded BMR and maintenance calories with the factor used."""

    bmr: int
    maintenance_calories: int
    activity_factor: float


class ProfileOrchestrator:
    """
    Orchestrates calculation services for the calorie calculator.

    Flow:
    1. Calculate BMR from body metrics
    2. Calculate maintenance calories from BMR and activity level
    3. Apply goal offset to get the rounded calorie target
    4. Split the target into macros
    5. Divide the macros across meals

    The presentation layer reruns the whole chain whenever any input
    changes and renders from the returned value only.
    """

    def __init__(
        self,
        bmr_service: BMRService,
        tdee_service: TDEEService,
        target_service: CalorieTargetService,
        macro_service: MacroService,
    ):
        self._bmr_service = bmr_service
        self._tdee_service = tdee_service
        self._target_service = target_service
        self._macro_service = macro_service

    def calculate(
        self,
        metrics: PersonMetrics,
        goal: Union[Goal, str],
        preferences: Optional[MacroPreferences] = None,
    ) -> ProfileCalculations:
        """
        Calculate every calculator figure.

        Args:
            metrics: Body metrics with activity level
            goal: Nutritional goal (cut/maintain/bulk)
            preferences: Macro split settings (form defaults when omitted)

        Returns:
            ProfileCalculations with all computed figures

        Raises:
            InvalidInputError: If inputs are incomplete (unknown goal,
                non-positive weight or meal count)
        """
        preferences = preferences or MacroPreferences()

        bmr = self._bmr_service.calculate(metrics)
        maintenance = self._tdee_service.calculate(bmr, metrics.activity_level)
        target_calories = self._target_service.calculate(maintenance, goal)

        macros = self._macro_service.calculate(
            calories=target_calories,
            weight_kg=metrics.weight_kg,
            protein_per_kg=preferences.protein_per_kg,
            fat_percent=preferences.fat_percent,
        )
        per_meal = self._macro_service.per_meal_share(macros, preferences.meals_per_day)

        return ProfileCalculations(
            bmr=bmr,
            maintenance=maintenance,
            target_calories=target_calories,
            macros=macros,
            per_meal=per_meal,
        )

    def daily_calorie_needs(self, metrics: PersonMetrics) -> DailyCalorieNeeds:
        """
        Calculate the rounded BMR and maintenance calories.

        Example:
            >>> needs = orchestrator.daily_calorie_needs(metrics)  # 80kg/180cm/30y male
            >>> needs.bmr, needs.maintenance_calories, needs.activity_factor
            (1780, 2759, 1.55)
        """
        bmr = self._bmr_service.calculate(metrics)
        maintenance = self._tdee_service.calculate(bmr, metrics.activity_level)

        return DailyCalorieNeeds(
            bmr=round_half_up(bmr.value),
            maintenance_calories=round_half_up(maintenance.value),
            activity_factor=maintenance.activity_factor,
        )
