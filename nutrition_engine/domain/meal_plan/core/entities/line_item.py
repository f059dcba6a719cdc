"""MealLineItem entity - one food with a quantity inside a plan meal."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....nutrition.core.entities.food_item import FoodItem
from ....shared.rounding import round_half_up, round_to_tenth


class MealLineItem(BaseModel):
    """
    Food line inside a plan meal.

    Nutrients are stored denormalised for the line's quantity. They are
    plain numbers captured when the line was written, so editing the
    referenced catalog food later does not change plan totals.

    Attributes:
        food_id: Catalog food the line was built from (optional)
        name: English name
        name_ar: Arabic name
        quantity_g: Quantity in grams
        calories: Energy in kcal for quantity_g
        protein: Protein in g for quantity_g
        carbs: Carbohydrates in g for quantity_g
        fat: Total fat in g for quantity_g
    """

    model_config = ConfigDict(frozen=True)

    food_id: Optional[str] = None
    name: str = ""
    name_ar: str = ""
    quantity_g: float = Field(0.0, ge=0, description="Quantity in grams")
    calories: float = Field(0.0, ge=0, description="Energy in kcal")
    protein: float = Field(0.0, ge=0, description="Protein in g")
    carbs: float = Field(0.0, ge=0, description="Carbohydrates in g")
    fat: float = Field(0.0, ge=0, description="Total fat in g")

    @field_validator("quantity_g", "calories", "protein", "carbs", "fat", mode="before")
    @classmethod
    def missing_as_zero(cls, v: Any) -> Any:
        """Treat an empty form value as 0."""
        return 0.0 if v is None or v == "" else v

    @classmethod
    def from_food(cls, food: FoodItem, quantity_g: float) -> MealLineItem:
        """
        Build a line from a catalog food, capturing its current nutrients.

        Example:
            >>> chicken = FoodItem(id="chicken", name="Chicken breast",
            ...                    calories=165, protein=31.0, carbs=0.0, fat=3.6)
            >>> line = MealLineItem.from_food(chicken, 150)
            >>> line.calories, line.protein
            (248.0, 46.5)
        """
        scaled = food.scale(quantity_g)
        return cls(
            food_id=food.id,
            name=food.name,
            name_ar=food.name_ar,
            quantity_g=quantity_g,
            calories=round_half_up(scaled.calories),
            protein=round_to_tenth(scaled.protein),
            carbs=round_to_tenth(scaled.carbs),
            fat=round_to_tenth(scaled.fat),
        )

    def is_blank(self) -> bool:
        """Check whether the line carries no information at all."""
        return (
            self.food_id is None
            and not self.name
            and not self.name_ar
            and not self.quantity_g
            and not self.calories
            and not self.protein
            and not self.carbs
            and not self.fat
        )
