"""Domain layer: pure value objects, entities and calculation services."""
