"""TDEE value object - maintenance calories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure (maintenance calories) in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level).
    Kept unrounded; rounding happens once, when the goal target is derived.

    Attributes:
        value: TDEE in kcal/day
        activity_factor: PAL multiplier that produced the value
    """

    value: float
    activity_factor: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        return f"TDEE(value={self.value}, activity_factor={self.activity_factor})"
