"""Feed conversion and growth analytics."""
