"""Nutrition plan commands."""

from .save_plan import SavePlanCommand, SavePlanHandler

__all__ = ["SavePlanCommand", "SavePlanHandler"]
