"""
Prompt Classifier for Traycer Lite

Maps a prompt to the artifact type it most likely asks for. Rules are
evaluated in a fixed priority order and the first match wins, so a prompt
mentioning both "function" and "react" is a function.
"""

import re

from .models import ArtifactType

# Ordered (pattern, type) rules. Order matters.
TYPE_RULES: list[tuple[str, ArtifactType]] = [
    (r"function", ArtifactType.FUNCTION),
    (r"(check|compute|calculate|determine|find|prime|factorial|fibonacci|reverse)", ArtifactType.FUNCTION),
    (r"(react|component|jsx|tsx)", ArtifactType.COMPONENT),
    (r"(endpoint|api|http|express|fetch)", ArtifactType.API),
    (r"(script|cli|command|utility)", ArtifactType.SCRIPT),
]

DEFAULT_TYPE = ArtifactType.FUNCTION


def match_rules(
    text: str,
    rules: list[tuple[str, ArtifactType]],
) -> ArtifactType | None:
    """
    Return the result of the first rule whose pattern matches.

    Args:
        text: Text to test (already lowercased by the caller)
        rules: Ordered list of (pattern, result) tuples

    Returns:
        Matching result, or None if no rule matched
    """
    for pattern, result in rules:
        if re.search(pattern, text):
            return result
    return None


def guess_type(prompt: str) -> ArtifactType:
    """
    Classify a prompt into an artifact type.

    Args:
        prompt: User prompt in any case

    Returns:
        The first matching ArtifactType, or FUNCTION when nothing matches
    """
    return match_rules(prompt.lower(), TYPE_RULES) or DEFAULT_TYPE
