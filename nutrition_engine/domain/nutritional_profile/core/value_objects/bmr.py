"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the calories needed for basic bodily functions at rest.
    No lower bound is applied: the raw formula value is kept even for
    edge inputs.

    Attributes:
        value: BMR in kcal/day
    """

    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        return f"BMR(value={self.value})"
