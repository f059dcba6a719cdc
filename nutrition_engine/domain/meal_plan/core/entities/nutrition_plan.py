"""Meal and NutritionPlan entities."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..value_objects.target_group import TargetGroup
from .line_item import MealLineItem


class Meal(BaseModel):
    """
    Meal inside a nutrition plan.

    Invariant: total_calories equals the sum of its line items' calories.
    PlanTotalsService restores it after every edit.

    Attributes:
        name: English name
        name_ar: Arabic name
        time: Time label (e.g. "08:00")
        foods: Ordered line items
        total_calories: Derived sum of line calories
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    name_ar: str = ""
    time: str = ""
    foods: tuple[MealLineItem, ...] = ()
    total_calories: float = 0.0

    @classmethod
    def empty(cls) -> Meal:
        """New meal holding a single blank line, as the editor starts it."""
        return cls(foods=(MealLineItem(),))


class NutritionPlan(BaseModel):
    """
    Nutrition plan: ordered meals for one day.

    Invariant: total_daily_calories equals the sum of the meals'
    total_calories, each of which equals the sum of its lines.

    Attributes:
        id: Store identifier (None until saved)
        name: English name
        name_ar: Arabic name
        description: English description
        description_ar: Arabic description
        target_group: Population the plan is written for
        meals: Ordered meals
        total_daily_calories: Derived sum of meal totals
        is_active: Whether the plan is listed publicly
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str = ""
    name_ar: str = ""
    description: str = ""
    description_ar: str = ""
    target_group: TargetGroup = TargetGroup.GENERAL
    meals: tuple[Meal, ...] = ()
    total_daily_calories: float = 0.0
    is_active: bool = True

    @classmethod
    def draft(cls, **fields: Any) -> NutritionPlan:
        """New plan draft with one empty meal unless meals are given."""
        fields.setdefault("meals", (Meal.empty(),))
        return cls(**fields)

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain values for storage/serialization."""
        return self.model_dump(mode="json")
