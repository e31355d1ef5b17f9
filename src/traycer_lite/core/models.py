"""
Core data models for Traycer Lite.

Defines the value types that flow through a single run:
- Flags: parsed command-line switches
- ArtifactType: the kind of code artifact a prompt asks for
- PlanAndCode: the planning layer plus the generated code
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ArtifactType(Enum):
    """Artifact categories that drive plan content and template choice."""
    FUNCTION = "function"
    COMPONENT = "component"
    SCRIPT = "script"
    API = "api"


@dataclass(frozen=True)
class Flags:
    """
    Command-line switches for one invocation.

    Attributes:
        ai: Attempt remote completion before the offline path
        json: Emit raw JSON instead of the human-readable sections
        out: Optional path to save the generated code to
        help: Show usage and exit
        version: Show version and exit
    """
    ai: bool = False
    json: bool = False
    out: str | None = None
    help: bool = False
    version: bool = False


@dataclass
class PlanAndCode:
    """
    The single output value of a run.

    Attributes:
        plan: Ordered planning steps
        code: Generated source text
    """
    plan: list[str] = field(default_factory=list)
    code: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "plan": list(self.plan),
            "code": self.code,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "PlanAndCode":
        """
        Create from a dictionary, validating its shape.

        Args:
            data: Decoded JSON value

        Returns:
            PlanAndCode built from the data

        Raises:
            ValueError: If plan is not a list of strings or code is not a string
        """
        if not isinstance(data, dict):
            raise ValueError("Expected a JSON object")

        plan = data.get("plan")
        code = data.get("code")
        if not isinstance(plan, list) or not all(isinstance(step, str) for step in plan):
            raise ValueError("'plan' must be a list of strings")
        if not isinstance(code, str):
            raise ValueError("'code' must be a string")

        return cls(plan=list(plan), code=code)
