"""Nutrition plan queries."""

from .list_plans import ListPlansHandler, ListPlansQuery

__all__ = ["ListPlansQuery", "ListPlansHandler"]
