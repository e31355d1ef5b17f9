"""
Name inference for generated code.

An explicit "function foo", "called foo" or "named foo" in the prompt always
wins. After that, well-known keywords map to conventional names, and
anything else falls back to a camelCase rendering of the prompt.
"""

import re

from .models import ArtifactType

EXPLICIT_FUNCTION_RE = re.compile(r"function\s+([a-zA-Z_][a-zA-Z0-9_]*)")
EXPLICIT_NAME_RE = re.compile(r"(?:called|named)\s+([a-zA-Z_][a-zA-Z0-9_]*)")

# Checked in order against the lowercased prompt
KEYWORD_NAMES: list[tuple[str, str]] = [
    (r"reverse", "reverseString"),
    (r"fibonacci|fib", "fibonacci"),
    (r"factorial", "factorial"),
    (r"debounce", "debounce"),
    (r"throttle", "throttle"),
    (r"prime", "isPrime"),
]

MAX_NAME_LENGTH = 24


def to_camel_case(text: str) -> str:
    """
    Convert free text to a camelCase identifier.

    Non-alphanumeric characters become word breaks. The first word is
    lowercased; each later word gets a capital first letter.

    Example:
        >>> to_camel_case("Parse the CSV-file")
        'parseTheCsvFile'
    """
    words = re.sub(r"[^a-zA-Z0-9 ]", " ", text).split()
    return "".join(
        word.lower() if i == 0 else word[:1].upper() + word[1:].lower()
        for i, word in enumerate(words)
    )


def guess_name(prompt: str, artifact_type: ArtifactType) -> str:
    """
    Derive an identifier for the generated artifact.

    Args:
        prompt: Original-case user prompt
        artifact_type: Classified artifact type

    Returns:
        Identifier to use in the code template
    """
    match = EXPLICIT_FUNCTION_RE.search(prompt)
    if match:
        return match.group(1)

    match = EXPLICIT_NAME_RE.search(prompt)
    if match:
        return match.group(1)

    base = to_camel_case(prompt)[:MAX_NAME_LENGTH]
    if not base:
        base = "MyComponent" if artifact_type == ArtifactType.COMPONENT else "doWork"

    lowered = prompt.lower()
    for pattern, name in KEYWORD_NAMES:
        if re.search(pattern, lowered):
            return name

    return base
