"""Ports for the livestock domain."""

from .feed_catalog import IFeedCatalog
from .observation_history import IObservationHistory

__all__ = ["IFeedCatalog", "IObservationHistory"]
