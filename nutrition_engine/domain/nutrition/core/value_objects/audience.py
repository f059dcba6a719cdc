"""Audience value object and its food-scoring weights."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ....shared.errors import InvalidInputError


class Audience(str, Enum):
    """Target population a food ranking is tailored to."""

    GENERAL = "general"
    DIABETIC = "diabetic"
    SENIOR = "senior"
    CHILD = "child"

    @classmethod
    def parse(cls, value: Union["Audience", str]) -> "Audience":
        """Coerce a raw value into an Audience.

        Raises:
            InvalidInputError: If value is not a known audience
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidInputError(f"Unknown audience: {value!r}") from e

    @classmethod
    def from_flags(
        cls,
        is_diabetic_friendly: Optional[bool] = None,
        is_senior_friendly: Optional[bool] = None,
        is_child_friendly: Optional[bool] = None,
    ) -> "Audience":
        """Infer the audience from suitability filters.

        The first flag set to True wins, in diabetic, senior, child order.

        Example:
            >>> Audience.from_flags(is_senior_friendly=True, is_child_friendly=True)
            <Audience.SENIOR: 'senior'>
        """
        if is_diabetic_friendly:
            return cls.DIABETIC
        if is_senior_friendly:
            return cls.SENIOR
        if is_child_friendly:
            return cls.CHILD
        return cls.GENERAL

    def weights(self) -> "ScoringWeights":
        """Get the scoring coefficients for this audience."""
        return SCORING_WEIGHTS[self]


@dataclass(frozen=True)
class ScoringWeights:
    """Linear coefficients applied to per-100 g nutrient values.

    Positive weights reward a nutrient, negative weights penalise it.
    Sodium is in mg, hence its much smaller coefficient.
    """

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0


# Fixed heuristic, not a fitted model. Adding an audience is a new row.
SCORING_WEIGHTS: Mapping[Audience, ScoringWeights] = MappingProxyType(
    {
        # Low sugar, high fiber, low carbs
        Audience.DIABETIC: ScoringWeights(
            fiber=3, protein=1.5, sugar=-4, carbs=-0.7, fat=-0.1
        ),
        # High protein, low sodium
        Audience.SENIOR: ScoringWeights(
            protein=3, fiber=1.2, carbs=-0.6, sodium=-0.01
        ),
        # Low sugar
        Audience.CHILD: ScoringWeights(protein=2, fiber=1, sugar=-3, carbs=-0.2),
        # Balanced
        Audience.GENERAL: ScoringWeights(
            protein=2, fiber=2, sugar=-2, carbs=-0.2, fat=-0.05
        ),
    }
)
