"""Action and output value objects."""

from enum import Enum


class ActionType(str, Enum):
    """What a rule does when its conditions pass.

    - NOTIFY: send a message to each output destination
    - RECOMMEND: ask the guidance provider for contextual advice
    - ANALYZE: run a named analytics computation
    - REPORT: format trigger data for each output destination
    - INTERVENE: build and deliver an educational intervention
    - CALL_API: invoke an external integration
    """

    NOTIFY = "notify"
    RECOMMEND = "recommend"
    ANALYZE = "analyze"
    REPORT = "report"
    INTERVENE = "intervene"
    CALL_API = "call_api"


class OutputDestination(str, Enum):
    STUDENT = "student"
    EDUCATOR = "educator"
    PARENT = "parent"
    DASHBOARD = "dashboard"
    RESEARCH = "research"
    EXTERNAL = "external"


class OutputFormat(str, Enum):
    PUSH = "push"
    EMAIL = "email"
    IN_APP = "in_app"
    JSON = "json"
    TEXT = "text"
