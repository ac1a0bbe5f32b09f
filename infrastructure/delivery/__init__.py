from .in_memory_outbox import InMemoryOutbox

__all__ = ["InMemoryOutbox"]
