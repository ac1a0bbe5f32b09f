from .anonymizer import RecordAnonymizer
from .quality import assess_quality
from .research_data_service import ResearchDataService

__all__ = ["RecordAnonymizer", "assess_quality", "ResearchDataService"]
