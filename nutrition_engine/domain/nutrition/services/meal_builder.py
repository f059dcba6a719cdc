"""Meal builder selection editing.

The selection is a tuple of FoodQuantity held by the caller. Every
function returns a new tuple and leaves its input untouched.
"""

from typing import Sequence

from ..core.value_objects.food_quantity import DEFAULT_QUANTITY_G, FoodQuantity


def add_food(
    selection: Sequence[FoodQuantity], food_id: str
) -> tuple[FoodQuantity, ...]:
    """Append food_id with the default 100 g, unless it is already selected."""
    if any(item.food_id == food_id for item in selection):
        return tuple(selection)
    return (*selection, FoodQuantity(food_id=food_id, quantity_g=DEFAULT_QUANTITY_G))


def update_quantity(
    selection: Sequence[FoodQuantity], index: int, quantity_g: float
) -> tuple[FoodQuantity, ...]:
    """Set the quantity of the entry at index; other entries are unchanged."""
    return tuple(
        FoodQuantity(food_id=item.food_id, quantity_g=quantity_g) if i == index else item
        for i, item in enumerate(selection)
    )


def remove_food(
    selection: Sequence[FoodQuantity], index: int
) -> tuple[FoodQuantity, ...]:
    """Drop the entry at index."""
    return tuple(item for i, item in enumerate(selection) if i != index)
