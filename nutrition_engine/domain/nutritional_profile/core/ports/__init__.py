"""Ports for nutritional profile calculations."""

from .calculators import (
    IBMRCalculator,
    ICalorieTargetCalculator,
    IMacroCalculator,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "ICalorieTargetCalculator",
    "IMacroCalculator",
]
