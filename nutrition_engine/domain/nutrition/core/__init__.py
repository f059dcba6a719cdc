"""Core model of the nutrition catalog."""
