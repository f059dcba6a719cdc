"""Domain exceptions for nutrition plans."""

from .domain_errors import InvalidPlanError

__all__ = ["InvalidPlanError"]
