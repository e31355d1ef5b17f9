"""
Traycer Lite - a planning layer plus final code from a short prompt

Traycer Lite classifies a natural-language prompt into an artifact type
(function, component, script or api), infers a symbol name, and produces an
eight-step plan together with a TypeScript template. With --ai and a
HUGGINGFACE_API_KEY it first asks a hosted model for the same pair.

Example usage:
    from traycer_lite import make_offline_plan_and_code

    result = make_offline_plan_and_code("write a function to check prime numbers")
    print(result.plan)
    print(result.code)
"""

__version__ = "0.1.0"

from .core import (
    ArtifactType,
    Flags,
    PlanAndCode,
    guess_name,
    guess_type,
    make_offline_plan_and_code,
    make_plan,
    select_template,
)

__all__ = [
    "__version__",
    "ArtifactType",
    "Flags",
    "PlanAndCode",
    "guess_type",
    "guess_name",
    "make_plan",
    "select_template",
    "make_offline_plan_and_code",
]
