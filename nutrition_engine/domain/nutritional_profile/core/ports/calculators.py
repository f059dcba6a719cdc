"""Calculator ports - interfaces for BMR/TDEE/target/macro calculations."""

from abc import ABC, abstractmethod
from typing import Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.goal import Goal
from ..value_objects.macro_breakdown import MacroBreakdown
from ..value_objects.person_metrics import PersonMetrics
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, metrics: PersonMetrics) -> BMR:
        """Calculate BMR from body metrics.

        Args:
            metrics: User biometric data

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for maintenance calorie calculation."""

    @abstractmethod
    def calculate(
        self, bmr: BMR, activity_level: Union[ActivityLevel, str]
    ) -> TDEE:
        """Calculate maintenance calories from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Maintenance calories
        """
        pass


class ICalorieTargetCalculator(ABC):
    """Port for goal-adjusted calorie target calculation."""

    @abstractmethod
    def calculate(
        self, maintenance: Union[TDEE, float], goal: Union[Goal, str]
    ) -> int:
        """Calculate rounded calorie target.

        Args:
            maintenance: Maintenance calories
            goal: Nutritional goal

        Returns:
            int: Daily calorie target
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation."""

    @abstractmethod
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
            fat_percent: Share of calories from fat

        Returns:
            MacroBreakdown: Protein/carbs/fat in grams and calories
        """
        pass

    @abstractmethod
    def per_meal_share(
        self, macros: MacroBreakdown, meals_per_day: int
    ) -> MacroBreakdown:
        """Divide a daily breakdown across meals.

        Args:
            macros: Daily macro breakdown
            meals_per_day: Number of meals

        Returns:
            MacroBreakdown: Per-meal figures
        """
        pass
