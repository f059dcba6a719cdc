"""TDEEService - maintenance calorie calculation."""

from typing import Union

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate maintenance calories (Total Daily Energy Expenditure).

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2
        - Light: 1.375
        - Moderate: 1.55
        - Active: 1.725
        - Very Active: 1.9
    """

    def calculate(
        self, bmr: BMR, activity_level: Union[ActivityLevel, str]
    ) -> TDEE:
        """Calculate maintenance calories from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level (enum or its value)

        Returns:
            TDEE: Unrounded maintenance calories in kcal/day

        Raises:
            InvalidInputError: If activity_level is not one of the five levels

        Example:
            >>> round(TDEEService().calculate(BMR(value=1780.0), "moderate").value, 2)
            2759.0
        """
        level = ActivityLevel.parse(activity_level)
        factor = level.pal_multiplier()
        return TDEE(value=bmr.value * factor, activity_factor=factor)
