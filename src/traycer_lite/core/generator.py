"""
Offline plan and code generation.

Runs the template path end to end: classify the prompt, infer a name,
build the planning layer and select a code template. Needs no network.
"""

import logging

from .classifier import guess_type
from .models import PlanAndCode
from .naming import guess_name
from .planner import make_plan
from .templates import select_template

logger = logging.getLogger(__name__)


def make_offline_plan_and_code(prompt: str) -> PlanAndCode:
    """
    Generate a plan and code for a prompt using templates only.

    Args:
        prompt: User prompt

    Returns:
        PlanAndCode with an eight-step plan and a template body
    """
    artifact_type = guess_type(prompt)
    name = guess_name(prompt, artifact_type)
    logger.debug("Classified prompt as %s, name=%s", artifact_type.value, name)

    plan = make_plan(prompt, artifact_type, name)
    code = select_template(artifact_type, name, prompt)
    return PlanAndCode(plan=plan, code=code)
