from .performance_goals import FocusArea, PerformanceGoals

__all__ = ["FocusArea", "PerformanceGoals"]
