"""Nutrition plan use cases."""
