"""Value objects for animal intelligence read-models."""

from .update_type import UpdateType

__all__ = ["UpdateType"]
