"""Intervention templates keyed by trigger name.

Descriptions are format strings filled from the trigger context;
unknown placeholders render as "n/a".
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class InterventionTemplate:
    title: str
    description: str
    action_items: Tuple[str, ...]
    resources: Tuple[str, ...]
    timeline: str
    follow_up_days: int


DEFAULT_TEMPLATE = "general_guidance"

INTERVENTION_TEMPLATES: Dict[str, InterventionTemplate] = {
    "high_fcr": InterventionTemplate(
        title="Improve feed conversion",
        description=(
            "Your animal's feed conversion ratio is {fcr}, above the 7.0 "
            "alert threshold. More feed is needed for every pound gained."
        ),
        action_items=(
            "Weigh feed at every feeding this week",
            "Check the ration against the feed label recommendations",
            "Compare FCR with your classmates' animals of the same species",
        ),
        resources=("Feed conversion basics", "Reading a feed tag"),
        timeline="1-2 weeks",
        follow_up_days=7,
    ),
    "efficient_feeding": InterventionTemplate(
        title="Excellent feed efficiency",
        description=(
            "Feed conversion of {fcr} beats typical results. Document what "
            "you are doing so it can be repeated."
        ),
        action_items=(
            "Write a journal entry describing your feeding routine",
            "Share your results with your advisor",
        ),
        resources=("Keeping production records",),
        timeline="This week",
        follow_up_days=30,
    ),
    "low_body_condition": InterventionTemplate(
        title="Body condition is low",
        description=(
            "The latest photo scored body condition {body_condition_score} "
            "on the 1-9 scale. The animal may need more energy."
        ),
        action_items=(
            "Increase feed gradually over 7-10 days",
            "Check for parasites and dental problems",
            "Take a new photo in two weeks",
        ),
        resources=("Body condition scoring guide", "Parasite management basics"),
        timeline="2 weeks",
        follow_up_days=14,
    ),
    "over_conditioning": InterventionTemplate(
        title="Body condition is high",
        description=(
            "The latest photo scored body condition {body_condition_score}. "
            "Over-conditioned animals convert feed poorly."
        ),
        action_items=(
            "Reduce concentrate feed",
            "Increase exercise opportunities",
            "Consider a maintenance ration",
        ),
        resources=("Body condition scoring guide",),
        timeline="2-3 weeks",
        follow_up_days=14,
    ),
    "weight_loss": InterventionTemplate(
        title="Weight loss detected",
        description="The animal lost {change} lb since the previous weighing.",
        action_items=(
            "Confirm the scale reading with a second weighing",
            "Observe feed intake for the next three days",
            "Contact your advisor or veterinarian if the loss continues",
        ),
        resources=("Recognizing illness in livestock",),
        timeline="3 days",
        follow_up_days=3,
    ),
    "health_concern": InterventionTemplate(
        title="Health indicators need attention",
        description=(
            "Photo health indicators averaged {health_score} out of 100. "
            "Some signs may need a closer look."
        ),
        action_items=(
            "Do a hands-on health check",
            "Record temperature, appetite and manure condition",
            "Discuss findings with your advisor",
        ),
        resources=("Daily health check routine",),
        timeline="Within 48 hours",
        follow_up_days=2,
    ),
    "milestone_reached": InterventionTemplate(
        title="Milestone reached",
        description="You reached the milestone '{milestone}'. Keep going!",
        action_items=(
            "Review what you learned in your journal",
            "Set your next learning goal",
        ),
        resources=("Project record book guide",),
        timeline="This week",
        follow_up_days=14,
    ),
    DEFAULT_TEMPLATE: InterventionTemplate(
        title="Project check-in",
        description="Something in your project needs a look: {type}.",
        action_items=("Review your latest records", "Ask your advisor for feedback"),
        resources=("Project record book guide",),
        timeline="1 week",
        follow_up_days=7,
    ),
}
