"""Calculation services for nutritional profile."""

from .bmr_service import BMRService
from .calorie_target_service import CalorieTargetService
from .macro_service import MacroService
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "CalorieTargetService",
    "MacroService",
]
