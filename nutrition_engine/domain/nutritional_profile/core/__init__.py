"""Core model of the nutritional profile domain."""
