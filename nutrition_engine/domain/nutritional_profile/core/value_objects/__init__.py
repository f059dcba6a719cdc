"""Value objects for nutritional profile domain."""

from .activity_level import ActivityLevel
from .biological_sex import BiologicalSex
from .bmr import BMR
from .goal import Goal
from .macro_breakdown import MacroBreakdown
from .macro_preferences import MacroPreferences
from .person_metrics import PersonMetrics
from .tdee import TDEE

__all__ = [
    "ActivityLevel",
    "BiologicalSex",
    "Goal",
    "PersonMetrics",
    "MacroPreferences",
    "BMR",
    "TDEE",
    "MacroBreakdown",
]
