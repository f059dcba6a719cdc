"""FoodRankingService - filter and sort the catalog for an audience."""

from typing import Iterable, Optional, Union

import structlog

from ..core.entities.food_item import FoodItem
from ..core.value_objects.audience import Audience
from ..core.value_objects.food_filters import FoodFilters
from .scoring_service import FoodScoringService

logger = structlog.get_logger(__name__)


class FoodRankingService:
    """Rank catalog foods by audience suitability.

    Flow:
    1. Keep foods matching every supplied filter
    2. Score each remaining food for the audience
    3. Sort descending; equal scores keep catalog order
    """

    def __init__(self, scoring_service: Optional[FoodScoringService] = None) -> None:
        self._scoring = scoring_service or FoodScoringService()

    def rank(
        self,
        foods: Iterable[FoodItem],
        audience: Optional[Union[Audience, str]] = None,
        filters: Optional[FoodFilters] = None,
    ) -> list[FoodItem]:
        """Filter, score and sort foods.

        Args:
            foods: Catalog snapshot in insertion order
            audience: Target audience; inferred from the suitability
                filters when omitted
            filters: Optional catalog filters (AND semantics)

        Returns:
            list[FoodItem]: Matching foods, best first

        Raises:
            InvalidInputError: If audience is unknown
        """
        filters = filters or FoodFilters()
        if audience is None:
            resolved = Audience.from_flags(
                is_diabetic_friendly=filters.is_diabetic_friendly,
                is_senior_friendly=filters.is_senior_friendly,
                is_child_friendly=filters.is_child_friendly,
            )
        else:
            resolved = Audience.parse(audience)

        candidates = [food for food in foods if filters.matches(food)]
        # sorted() is stable, also with reverse=True
        ranked = sorted(
            candidates,
            key=lambda food: self._scoring.score(food, resolved),
            reverse=True,
        )

        logger.debug("Ranked foods", audience=resolved.value, count=len(ranked))
        return ranked
