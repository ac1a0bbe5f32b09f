from .intelligence_orchestrator import AnalyticsEngines, IntelligenceOrchestrator

__all__ = ["AnalyticsEngines", "IntelligenceOrchestrator"]
