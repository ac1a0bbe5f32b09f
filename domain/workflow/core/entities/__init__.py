"""Entities for workflow automation."""

from .execution import RuleResult, WorkflowExecutionRecord
from .intervention import DeliveryPlan, EducationalIntervention
from .messages import Notification, WorkflowReport
from .payloads import (
    PAYLOAD_TYPES,
    EducationalMilestonePayload,
    FCRCalculationPayload,
    FeedEntryPayload,
    PerformanceAlertPayload,
    PhotoAnalysisPayload,
    TriggerPayload,
    WeightChangePayload,
    payload_from_mapping,
)
from .research import (
    ComplianceFlags,
    DataQualityScores,
    FieldAggregate,
    ResearchDataWorkflowResult,
    ResearchWorkflowConfig,
)
from .rule import Condition, RuleOutput, Workflow, WorkflowRule
from .trigger import WorkflowTrigger

__all__ = [
    "RuleResult",
    "WorkflowExecutionRecord",
    "DeliveryPlan",
    "EducationalIntervention",
    "Notification",
    "WorkflowReport",
    "PAYLOAD_TYPES",
    "EducationalMilestonePayload",
    "FCRCalculationPayload",
    "FeedEntryPayload",
    "PerformanceAlertPayload",
    "PhotoAnalysisPayload",
    "TriggerPayload",
    "WeightChangePayload",
    "payload_from_mapping",
    "ComplianceFlags",
    "DataQualityScores",
    "FieldAggregate",
    "ResearchDataWorkflowResult",
    "ResearchWorkflowConfig",
    "Condition",
    "RuleOutput",
    "Workflow",
    "WorkflowRule",
    "WorkflowTrigger",
]
