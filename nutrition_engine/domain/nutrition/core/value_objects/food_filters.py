"""FoodFilters value object - catalog query filters."""

from dataclasses import dataclass
from typing import Optional, Union

from ..entities.food_item import FoodItem, MealType


@dataclass(frozen=True)
class FoodFilters:
    """Catalog filters combined with AND semantics.

    A None field is not filtered on. Suitability flags compare by
    equality, so ``is_child_friendly=False`` selects foods that are
    explicitly not child friendly.

    Attributes:
        category: Category in either language
        meal_type: Typical meal slot
        is_diabetic_friendly: Required diabetic flag value
        is_senior_friendly: Required senior flag value
        is_child_friendly: Required child flag value
    """

    category: Optional[str] = None
    meal_type: Optional[Union[MealType, str]] = None
    is_diabetic_friendly: Optional[bool] = None
    is_senior_friendly: Optional[bool] = None
    is_child_friendly: Optional[bool] = None

    def __post_init__(self) -> None:
        """Coerce meal_type.

        Raises:
            InvalidInputError: If meal_type is unknown
        """
        if self.meal_type is not None:
            object.__setattr__(self, "meal_type", MealType.parse(self.meal_type))

    def matches(self, food: FoodItem) -> bool:
        """Check whether food satisfies every supplied filter."""
        if self.category is not None and self.category not in (
            food.category,
            food.category_ar,
        ):
            return False

        if self.meal_type is not None and food.meal_type != self.meal_type:
            return False

        flags = (
            (self.is_diabetic_friendly, food.is_diabetic_friendly),
            (self.is_senior_friendly, food.is_senior_friendly),
            (self.is_child_friendly, food.is_child_friendly),
        )
        return all(wanted is None or wanted == actual for wanted, actual in flags)
