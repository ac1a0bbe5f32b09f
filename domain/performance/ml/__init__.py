"""Statistical growth models."""

from .growth_trajectory import GrowthTrajectory, GrowthTrajectoryService

__all__ = ["GrowthTrajectory", "GrowthTrajectoryService"]
