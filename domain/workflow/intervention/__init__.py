from .intervention_service import InterventionService
from .templates import INTERVENTION_TEMPLATES, InterventionTemplate

__all__ = ["InterventionService", "INTERVENTION_TEMPLATES", "InterventionTemplate"]
