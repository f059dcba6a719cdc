"""FoodQuantity value object - one selected food in the meal builder."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_QUANTITY_G = 100.0


class FoodQuantity(BaseModel):
    """
    Reference to a catalog food with a quantity in grams.

    Example:
        >>> FoodQuantity(food_id="oats").quantity_g
        100.0
    """

    model_config = ConfigDict(frozen=True)

    food_id: str = Field(..., min_length=1, description="Catalog identifier")
    quantity_g: float = Field(DEFAULT_QUANTITY_G, ge=0, description="Grams")
