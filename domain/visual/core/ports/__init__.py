from .body_condition_inference import IBodyConditionInference

__all__ = ["IBodyConditionInference"]
