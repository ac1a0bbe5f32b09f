from .fcr_history import IFCRHistory

__all__ = ["IFCRHistory"]
