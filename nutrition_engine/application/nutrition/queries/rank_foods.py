"""RankFoodsQuery - ranked food catalog for an audience."""

from dataclasses import dataclass, field
from typing import Optional, Union

from nutrition_engine.domain.nutrition.core.entities.food_item import FoodItem
from nutrition_engine.domain.nutrition.core.ports.food_repository import IFoodRepository
from nutrition_engine.domain.nutrition.core.value_objects.audience import Audience
from nutrition_engine.domain.nutrition.core.value_objects.food_filters import FoodFilters
from nutrition_engine.domain.nutrition.services.ranking_service import FoodRankingService


@dataclass(frozen=True)
class RankFoodsQuery:
    """Query for the ranked catalog.

    Attributes:
        audience: Target audience (inferred from filters when None)
        filters: Catalog filters
    """

    audience: Optional[Union[Audience, str]] = None
    filters: FoodFilters = field(default_factory=FoodFilters)


class RankFoodsHandler:
    """Handler for RankFoodsQuery."""

    def __init__(self, repository: IFoodRepository, ranking_service: FoodRankingService):
        self._repository = repository
        self._ranking_service = ranking_service

    async def handle(self, query: RankFoodsQuery) -> list[FoodItem]:
        """
        Load the catalog and rank it.

        Returns:
            list[FoodItem]: Matching foods, most suitable first
        """
        foods = await self._repository.list_all()
        return self._ranking_service.rank(foods, query.audience, query.filters)
