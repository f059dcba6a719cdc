"""TargetGroup value object - population a nutrition plan is written for."""

from enum import Enum
from typing import Union

from ....nutrition.core.value_objects.audience import Audience
from ....shared.errors import InvalidInputError


class TargetGroup(str, Enum):
    """Population a nutrition plan targets."""

    GENERAL = "general"
    DIABETES = "diabetes"
    SENIORS = "seniors"
    CHILDREN = "children"

    @classmethod
    def parse(cls, value: Union["TargetGroup", str]) -> "TargetGroup":
        """Coerce a raw value into a TargetGroup.

        Raises:
            InvalidInputError: If value is not a known target group
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidInputError(f"Unknown target group: {value!r}") from e

    def audience(self) -> Audience:
        """Get the food-ranking audience matching this group.

        Example:
            >>> TargetGroup.DIABETES.audience()
            <Audience.DIABETIC: 'diabetic'>
        """
        audiences = {
            TargetGroup.GENERAL: Audience.GENERAL,
            TargetGroup.DIABETES: Audience.DIABETIC,
            TargetGroup.SENIORS: Audience.SENIOR,
            TargetGroup.CHILDREN: Audience.CHILD,
        }
        return audiences[self]
