"""Nutrition plan services."""

from .plan_editor import PlanEditor
from .totals_service import PlanTotalsService

__all__ = ["PlanTotalsService", "PlanEditor"]
