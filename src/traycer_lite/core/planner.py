"""Plan Generator: the planning layer shown before the code."""

from .models import ArtifactType

TYPE_STEPS: dict[ArtifactType, str] = {
    ArtifactType.FUNCTION: "Design function signature and return type.",
    ArtifactType.COMPONENT: "Sketch props and state; plan rendering.",
    ArtifactType.API: "Define route, method, request/response schema, and errors.",
    ArtifactType.SCRIPT: "Define CLI flags, usage, and I/O.",
}

LEADING_STEPS = [
    "Identify inputs and outputs.",
    "List edge cases and constraints.",
]

TRAILING_STEPS = [
    "Outline algorithm in small steps.",
    "Write code with clear comments.",
    "Add basic tests or examples.",
    "Validate on edge cases.",
]


def make_plan(prompt: str, artifact_type: ArtifactType, name: str) -> list[str]:
    """
    Build the ordered planning steps for a prompt.

    The result always has eight steps; only the fourth depends on the
    artifact type. ``name`` is accepted for symmetry with the template
    selector and does not appear in the steps.
    """
    steps = [f"Restate goal: {prompt}"]
    steps.extend(LEADING_STEPS)
    steps.append(TYPE_STEPS[artifact_type])
    steps.extend(TRAILING_STEPS)
    return steps
