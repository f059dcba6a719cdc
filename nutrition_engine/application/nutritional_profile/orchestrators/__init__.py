"""Orchestrators for the calorie calculator."""

from .profile_orchestrator import DailyCalorieNeeds, ProfileCalculations, ProfileOrchestrator

__all__ = ["ProfileOrchestrator", "ProfileCalculations", "DailyCalorieNeeds"]
