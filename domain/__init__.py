"""Domain layer for livestock performance analytics."""
