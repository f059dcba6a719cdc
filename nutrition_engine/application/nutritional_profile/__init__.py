"""Nutritional profile use cases."""
