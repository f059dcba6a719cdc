"""Nutrition catalog domain: food scoring, ranking and meal building."""
