"""Shared domain primitives."""

from .errors import DomainError, InvalidInput, InvalidInputError
from .rounding import clamp, finite_or_zero, round_half_up, round_to_tenth

__all__ = [
    "DomainError",
    "InvalidInputError",
    "InvalidInput",
    "round_half_up",
    "round_to_tenth",
    "clamp",
    "finite_or_zero",
]
