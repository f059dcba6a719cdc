"""Meal plan domain: plan/meal/line-item totals and draft editing."""
