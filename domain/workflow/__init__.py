"""Trigger / condition / action workflow automation."""
