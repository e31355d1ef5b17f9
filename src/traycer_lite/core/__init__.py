"""
Traycer Lite Core Module

Contains the offline generation logic:
- models: Flags, ArtifactType and PlanAndCode
- classifier: Prompt-to-artifact-type rules
- naming: Identifier inference
- planner: Planning layer steps
- templates: Code templates
- generator: Offline plan and code path
"""

from .classifier import guess_type
from .generator import make_offline_plan_and_code
from .models import ArtifactType, Flags, PlanAndCode
from .naming import guess_name, to_camel_case
from .planner import make_plan
from .templates import select_template

__all__ = [
    "ArtifactType",
    "Flags",
    "PlanAndCode",
    "guess_type",
    "guess_name",
    "to_camel_case",
    "make_plan",
    "select_template",
    "make_offline_plan_and_code",
]
