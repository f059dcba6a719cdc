"""Ports for nutrition plans."""

from .plan_repository import IPlanRepository

__all__ = ["IPlanRepository"]
