from .in_memory_exporter import InMemoryResearchExporter

__all__ = ["InMemoryResearchExporter"]
