"""Workflow definitions and their YAML parser."""

from .parser import (
    DEFAULT_WORKFLOWS_PATH,
    load_default_workflows,
    load_workflows_from_file,
    load_workflows_from_yaml_text,
    parse_workflow,
)

__all__ = [
    "DEFAULT_WORKFLOWS_PATH",
    "load_default_workflows",
    "load_workflows_from_file",
    "load_workflows_from_yaml_text",
    "parse_workflow",
]
