"""Domain layer: value objects and derived views."""
