"""
Food catalog entities.

Snapshot of a catalog food as supplied by the persistence layer.
The engine only reads these; admin edits produce new snapshots.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....shared.errors import InvalidInputError


class MealType(str, Enum):
    """Meal slot a food is typically eaten in."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @classmethod
    def parse(cls, value: Union[MealType, str]) -> MealType:
        """Coerce a raw filter value into a MealType.

        Raises:
            InvalidInputError: If value is not a known meal slot
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidInputError(f"Unknown meal type: {value!r}") from e


class ScaledNutrients(NamedTuple):
    """Unrounded macronutrients for a specific quantity."""

    calories: float
    protein: float
    carbs: float
    fat: float


class FoodItem(BaseModel):
    """
    Catalog food with its nutrient profile per 100 g.

    Optional micronutrients (fiber, sugar, sodium) default to 0; an explicit
    None from the store is normalised to 0 here so scoring never has to
    null-check.

    Attributes:
        id: Catalog identifier
        name: English name
        name_ar: Arabic name
        category: English category
        category_ar: Arabic category
        meal_type: Typical meal slot (optional)
        calories: Energy in kcal per 100 g
        protein: Protein in g per 100 g
        carbs: Carbohydrates in g per 100 g
        fat: Total fat in g per 100 g
        fiber: Dietary fiber in g per 100 g
        sugar: Total sugars in g per 100 g
        sodium: Sodium in mg per 100 g
        is_diabetic_friendly: Suitable for diabetics
        is_senior_friendly: Suitable for seniors
        is_child_friendly: Suitable for children

    Example:
        >>> chicken = FoodItem(
        ...     id="chicken_breast",
        ...     name="Chicken breast",
        ...     category="Protein",
        ...     calories=165,
        ...     protein=31.0,
        ...     carbs=0.0,
        ...     fat=3.6,
        ... )
        >>> chicken.scale(150.0).calories
        247.5
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Catalog identifier")
    name: str = ""
    name_ar: str = ""
    category: str = ""
    category_ar: str = ""
    meal_type: Optional[MealType] = None

    # Required macronutrients (per 100 g)
    calories: float = Field(..., ge=0, description="Energy in kcal")
    protein: float = Field(..., ge=0, description="Protein in g")
    carbs: float = Field(..., ge=0, description="Carbohydrates in g")
    fat: float = Field(..., ge=0, description="Total fat in g")

    # Optional micronutrients (per 100 g)
    fiber: float = Field(0.0, ge=0, description="Fiber in g")
    sugar: float = Field(0.0, ge=0, description="Sugar in g")
    sodium: float = Field(0.0, ge=0, description="Sodium in mg")

    # Audience suitability
    is_diabetic_friendly: bool = False
    is_senior_friendly: bool = False
    is_child_friendly: bool = False

    @field_validator("fiber", "sugar", "sodium", mode="before")
    @classmethod
    def missing_as_zero(cls, v: Optional[float]) -> float:
        """Treat an absent micronutrient as 0."""
        return 0.0 if v is None else v

    def scale(self, quantity_g: float) -> ScaledNutrients:
        """
        Scale macronutrients from the 100 g reference to quantity_g.

        Args:
            quantity_g: Quantity in grams

        Returns:
            Unrounded calories/protein/carbs/fat for that quantity
        """
        factor = quantity_g / 100
        return ScaledNutrients(
            calories=self.calories * factor,
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fat=self.fat * factor,
        )
