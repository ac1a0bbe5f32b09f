"""Mentor guidance contracts shared by workflows and orchestration."""
