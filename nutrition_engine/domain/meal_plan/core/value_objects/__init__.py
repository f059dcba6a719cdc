"""Value objects for nutrition plans."""

from .target_group import TargetGroup

__all__ = ["TargetGroup"]
