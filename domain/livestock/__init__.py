"""Shared livestock domain model: observations, feed products, photos."""
