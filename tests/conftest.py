"""Shared test fixtures.

Unit tests run against pure domain services and in-memory adapters; no
external services are needed.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from nutrition_engine.domain.meal_plan.core.entities.line_item import MealLineItem
from nutrition_engine.domain.meal_plan.core.entities.nutrition_plan import (
    Meal,
    NutritionPlan,
)
from nutrition_engine.domain.meal_plan.core.value_objects.target_group import TargetGroup
from nutrition_engine.domain.nutrition.core.entities.food_item import FoodItem, MealType
from nutrition_engine.domain.nutritional_profile.core.value_objects import (
    ActivityLevel,
    PersonMetrics,
)

# Load .env (LOG_LEVEL, LOG_FORMAT) when present
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


@pytest.fixture
def sample_metrics() -> PersonMetrics:
    """80kg / 180cm / 30y male, moderately active."""
    return PersonMetrics(
        age=30,
        sex="male",
        height_cm=180.0,
        weight_kg=80.0,
        activity_level=ActivityLevel.MODERATE,
    )


@pytest.fixture
def chicken_breast() -> FoodItem:
    return FoodItem(
        id="chicken_breast",
        name="Chicken breast",
        name_ar="صدر دجاج",
        category="Protein",
        category_ar="بروتين",
        meal_type=MealType.LUNCH,
        calories=165,
        protein=31.0,
        carbs=0.0,
        fat=3.6,
        sodium=74,
        is_diabetic_friendly=True,
        is_senior_friendly=True,
        is_child_friendly=True,
    )


@pytest.fixture
def white_rice() -> FoodItem:
    return FoodItem(
        id="white_rice",
        name="White rice",
        name_ar="أرز أبيض",
        category="Grains",
        category_ar="حبوب",
        meal_type=MealType.LUNCH,
        calories=130,
        protein=2.7,
        carbs=28.0,
        fat=0.3,
        fiber=0.4,
        sugar=0.1,
        sodium=1,
        is_senior_friendly=True,
        is_child_friendly=True,
    )


@pytest.fixture
def oats() -> FoodItem:
    return FoodItem(
        id="oats",
        name="Oats",
        name_ar="شوفان",
        category="Grains",
        category_ar="حبوب",
        meal_type=MealType.BREAKFAST,
        calories=389,
        protein=16.9,
        carbs=66.3,
        fat=6.9,
        fiber=10.6,
        sugar=0.0,
        sodium=2,
        is_diabetic_friendly=True,
        is_senior_friendly=True,
        is_child_friendly=True,
    )


@pytest.fixture
def chocolate_bar() -> FoodItem:
    return FoodItem(
        id="chocolate_bar",
        name="Milk chocolate",
        name_ar="شوكولاتة بالحليب",
        category="Snacks",
        category_ar="وجبات خفيفة",
        meal_type=MealType.SNACK,
        calories=535,
        protein=7.7,
        carbs=59.4,
        fat=29.7,
        fiber=3.4,
        sugar=51.5,
        sodium=79,
        is_child_friendly=True,
    )


@pytest.fixture
def catalog(chicken_breast, white_rice, oats, chocolate_bar) -> list[FoodItem]:
    """Catalog snapshot in insertion order."""
    return [chicken_breast, white_rice, oats, chocolate_bar]


@pytest.fixture
def complete_plan() -> NutritionPlan:
    """Plan draft that passes save validation (totals not yet computed)."""
    return NutritionPlan(
        name="Balanced day",
        name_ar="يوم متوازن",
        description="Everyday balanced plan",
        description_ar="خطة متوازنة يومية",
        target_group=TargetGroup.GENERAL,
        meals=(
            Meal(
                name="Breakfast",
                name_ar="فطور",
                time="08:00",
                foods=(
                    MealLineItem(name="Oats", name_ar="شوفان", quantity_g=50, calories=195),
                    MealLineItem(name="Milk", name_ar="حليب", quantity_g=200, calories=124),
                ),
            ),
            Meal(
                name="Lunch",
                name_ar="غداء",
                time="13:00",
                foods=(
                    MealLineItem(
                        name="Chicken", name_ar="دجاج", quantity_g=150, calories=248
                    ),
                ),
            ),
        ),
    )
