"""ActivityLevel value object - physical activity level for maintenance calories."""

from enum import Enum
from typing import Union

from ....shared.errors import InvalidInputError


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) used to scale BMR.

    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def parse(cls, value: Union["ActivityLevel", str]) -> "ActivityLevel":
        """Coerce a raw form value into an ActivityLevel.

        Raises:
            InvalidInputError: If value is not one of the five levels
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidInputError(f"Unknown activity level: {value!r}") from e

    def pal_multiplier(self) -> float:
        """Get PAL multiplier applied to BMR.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return _PAL_MULTIPLIERS[self]


_PAL_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
