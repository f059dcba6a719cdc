"""Goal value object - user's nutritional objective."""

from enum import Enum
from typing import Union

from ....shared.errors import InvalidInputError


class Goal(str, Enum):
    """User's nutritional goal determining calorie adjustment.

    - CUT: Weight loss with a 500 kcal/day deficit
    - MAINTAIN: Weight maintenance at maintenance calories
    - BULK: Muscle gain with a 500 kcal/day surplus
    """

    CUT = "cut"
    MAINTAIN = "maintain"
    BULK = "bulk"

    @classmethod
    def parse(cls, value: Union["Goal", str]) -> "Goal":
        """Coerce a raw form value into a Goal.

        Raises:
            InvalidInputError: If value is not cut, maintain or bulk
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidInputError(f"Unknown goal: {value!r}") from e

    def calorie_offset(self) -> int:
        """Get kcal/day added to maintenance calories.

        Example:
            >>> Goal.CUT.calorie_offset()
            -500
        """
        offsets = {
            Goal.CUT: -500,
            Goal.MAINTAIN: 0,
            Goal.BULK: 500,
        }
        return offsets[self]
