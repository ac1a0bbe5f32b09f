from .in_memory_feed_catalog import InMemoryFeedCatalog, default_feed_products

__all__ = ["InMemoryFeedCatalog", "default_feed_products"]
