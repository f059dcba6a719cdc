"""
Nutrition engine.

Calorie and macro calculation, audience-aware food ranking, meal
nutrition totals and nutrition plan editing.
"""

from .domain.meal_plan.core.entities.line_item import MealLineItem
from .domain.meal_plan.core.entities.nutrition_plan import Meal, NutritionPlan
from .domain.meal_plan.core.exceptions.domain_errors import InvalidPlanError
from .domain.meal_plan.core.value_objects.target_group import TargetGroup
from .domain.nutrition.core.entities.food_item import FoodItem, MealType
from .domain.nutrition.core.value_objects.audience import Audience
from .domain.nutrition.core.value_objects.food_filters import FoodFilters
from .domain.nutrition.core.value_objects.food_quantity import FoodQuantity
from .domain.nutrition.core.value_objects.meal_totals import MealTotals
from .domain.nutritional_profile.core.value_objects import (
    ActivityLevel,
    BiologicalSex,
    Goal,
    MacroBreakdown,
    MacroPreferences,
    PersonMetrics,
)
from .domain.shared.errors import DomainError, InvalidInput, InvalidInputError
from .engine import (
    calculate_meal_calories,
    compute_bmr,
    compute_macros,
    compute_maintenance_calories,
    compute_target_calories,
    per_meal_share,
    rank_foods,
    recompute_meal_total,
    recompute_plan_total,
    score_food,
)

__version__ = "1.0.0"

__all__ = [
    # Operations
    "compute_bmr",
    "compute_maintenance_calories",
    "compute_target_calories",
    "compute_macros",
    "per_meal_share",
    "score_food",
    "rank_foods",
    "calculate_meal_calories",
    "recompute_meal_total",
    "recompute_plan_total",
    # Profile
    "ActivityLevel",
    "BiologicalSex",
    "Goal",
    "PersonMetrics",
    "MacroPreferences",
    "MacroBreakdown",
    # Foods
    "FoodItem",
    "MealType",
    "Audience",
    "FoodFilters",
    "FoodQuantity",
    "MealTotals",
    # Plans
    "MealLineItem",
    "Meal",
    "NutritionPlan",
    "TargetGroup",
    # Errors
    "DomainError",
    "InvalidInputError",
    "InvalidInput",
    "InvalidPlanError",
]
