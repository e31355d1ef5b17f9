"""
Traycer Lite LLM Module

Optional remote completion through the Hugging Face inference API.

Key Components:
- LLMProvider: Abstract base class for providers
- HuggingFaceProvider: aiohttp-based inference client
- maybe_remote_plan_and_code: Best-effort remote PlanAndCode
"""

from .base import (
    AuthenticationError,
    LLMError,
    LLMProvider,
    ModelNotFoundError,
    RateLimitError,
)
from .huggingface import HuggingFaceProvider
from .remote import (
    extract_generated_text,
    extract_plan_and_code,
    maybe_remote_plan_and_code,
)

__all__ = [
    "AuthenticationError",
    "HuggingFaceProvider",
    "LLMError",
    "LLMProvider",
    "ModelNotFoundError",
    "RateLimitError",
    "extract_generated_text",
    "extract_plan_and_code",
    "maybe_remote_plan_and_code",
]
