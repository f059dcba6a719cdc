"""Nutrition catalog use cases."""
