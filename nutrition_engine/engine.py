"""
Function facade over the domain services.

UI code and persistence handlers call these instead of wiring services
themselves, so both sides share one set of service instances and
therefore one implementation of every calculation.

Example:
    >>> from nutrition_engine import engine
    >>> bmr = engine.compute_bmr(
    ...     PersonMetrics(age=30, sex="male", height_cm=180, weight_kg=80,
    ...                   activity_level="moderate")
    ... )
    >>> bmr
    1780.0
    >>> engine.compute_target_calories(
    ...     engine.compute_maintenance_calories(bmr, "moderate"), "cut"
    ... )
    2259
"""

from typing import Iterable, Mapping, Optional, Union

from .domain.meal_plan.core.entities.nutrition_plan import Meal, NutritionPlan
from .domain.meal_plan.services.totals_service import PlanTotalsService
from .domain.nutrition.core.entities.food_item import FoodItem
from .domain.nutrition.core.value_objects.audience import Audience
from .domain.nutrition.core.value_objects.food_filters import FoodFilters
from .domain.nutrition.core.value_objects.food_quantity import FoodQuantity
from .domain.nutrition.core.value_objects.meal_totals import MealTotals
from .domain.nutrition.services.meal_nutrition_service import MealNutritionService
from .domain.nutrition.services.ranking_service import FoodRankingService
from .domain.nutrition.services.scoring_service import FoodScoringService
from .domain.nutritional_profile.calculation.bmr_service import BMRService
from .domain.nutritional_profile.calculation.calorie_target_service import (
    CalorieTargetService,
)
from .domain.nutritional_profile.calculation.macro_service import MacroService
from .domain.nutritional_profile.calculation.tdee_service import TDEEService
from .domain.nutritional_profile.core.value_objects.activity_level import ActivityLevel
from .domain.nutritional_profile.core.value_objects.bmr import BMR
from .domain.nutritional_profile.core.value_objects.goal import Goal
from .domain.nutritional_profile.core.value_objects.macro_breakdown import MacroBreakdown
from .domain.nutritional_profile.core.value_objects.person_metrics import PersonMetrics

# Shared, stateless service instances
bmr_service = BMRService()
tdee_service = TDEEService()
target_service = CalorieTargetService()
macro_service = MacroService()
scoring_service = FoodScoringService()
ranking_service = FoodRankingService(scoring_service)
meal_nutrition_service = MealNutritionService()
totals_service = PlanTotalsService()


# ═══════════════════════════════════════════════════════════════
# Energy
# ═══════════════════════════════════════════════════════════════


def compute_bmr(metrics: PersonMetrics) -> float:
    """Unrounded Mifflin-St Jeor BMR in kcal/day."""
    return bmr_service.calculate(metrics).value


def compute_maintenance_calories(
    bmr: float, activity_level: Union[ActivityLevel, str]
) -> float:
    """Unrounded maintenance calories (BMR × activity factor)."""
    return tdee_service.calculate(BMR(value=bmr), activity_level).value


def compute_target_calories(maintenance: float, goal: Union[Goal, str]) -> int:
    """Goal-adjusted calorie target, rounded half-up."""
    return target_service.calculate(maintenance, goal)


# ═══════════════════════════════════════════════════════════════
# Macros
# ═══════════════════════════════════════════════════════════════


def compute_macros(
    calories: float,
    weight_kg: float,
    protein_per_kg: float,
    fat_percent: float,
) -> MacroBreakdown:
    """Split calories into protein, carbs and fat."""
    return macro_service.calculate(calories, weight_kg, protein_per_kg, fat_percent)


def per_meal_share(macros: MacroBreakdown, meals_per_day: int) -> MacroBreakdown:
    """Divide a daily breakdown across meals."""
    return macro_service.per_meal_share(macros, meals_per_day)


# ═══════════════════════════════════════════════════════════════
# Foods
# ═══════════════════════════════════════════════════════════════


def score_food(food: FoodItem, audience: Union[Audience, str]) -> float:
    return scoring_service.score(food, audience)


def rank_foods(
    foods: Iterable[FoodItem],
    audience: Optional[Union[Audience, str]] = None,
    filters: Optional[FoodFilters] = None,
) -> list[FoodItem]:
    """Filter and sort foods, most suitable for the audience first."""
    return ranking_service.rank(foods, audience, filters)


def calculate_meal_calories(
    items: Iterable[FoodQuantity], catalog: Mapping[str, FoodItem]
) -> MealTotals:
    """Totals for a meal builder selection; unknown food ids are skipped."""
    return meal_nutrition_service.calculate(items, catalog)


# ═══════════════════════════════════════════════════════════════
# Plans
# ═══════════════════════════════════════════════════════════════


def recompute_meal_total(meal: Meal) -> Meal:
    return totals_service.recompute_meal(meal)


def recompute_plan_total(plan: NutritionPlan) -> NutritionPlan:
    return totals_service.recompute_plan(plan)
