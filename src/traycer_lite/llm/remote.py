"""
Remote Completion Adapter

Asks a hosted model for a plan and code and pulls a JSON object out of the
free-form reply. Every failure collapses to None so the caller can fall back
to the offline path without further checks.
"""

import json
import logging
import re
from typing import Any

from ..core.models import PlanAndCode
from ..settings.models import Settings
from .base import LLMError, LLMProvider
from .huggingface import HuggingFaceProvider

logger = logging.getLogger(__name__)

JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def extract_generated_text(data: Any) -> str | None:
    """
    Find the generated text in an inference response body.

    Accepts either a list whose first item has ``generated_text`` or an
    object with a string ``generated_text``.
    """
    if isinstance(data, list):
        if data and isinstance(data[0], dict) and data[0].get("generated_text"):
            text = data[0]["generated_text"]
            return text if isinstance(text, str) else None
        return None
    if isinstance(data, dict) and isinstance(data.get("generated_text"), str):
        return data["generated_text"] or None
    return None


def extract_plan_and_code(text: str) -> PlanAndCode | None:
    """
    Parse the first brace-delimited JSON object in text as a PlanAndCode.

    Returns:
        PlanAndCode, or None if there is no object or its shape is wrong
    """
    match = JSON_OBJECT_RE.search(text)
    if not match:
        return None
    try:
        return PlanAndCode.from_dict(json.loads(match.group()))
    except (json.JSONDecodeError, ValueError, RecursionError) as e:
        logger.debug("Discarding remote completion: %s", e)
        return None


def create_provider(settings: Settings) -> LLMProvider:
    """Build the remote provider from settings."""
    return HuggingFaceProvider(
        api_key=settings.api_key,
        model=settings.model,
        base_url=settings.base_url,
        timeout=settings.timeout,
    )


async def maybe_remote_plan_and_code(
    prompt: str,
    settings: Settings,
    provider: LLMProvider | None = None,
) -> PlanAndCode | None:
    """
    Try to get a plan and code from the remote model.

    Args:
        prompt: User prompt
        settings: Loaded settings (must carry an API key to do anything)
        provider: Optional provider override

    Returns:
        PlanAndCode on a well-formed reply, otherwise None
    """
    if not settings.has_api_key:
        return None

    provider = provider or create_provider(settings)
    try:
        data = await provider.generate_text(prompt)
        text = extract_generated_text(data)
        if not text:
            logger.debug("Remote completion returned no generated_text")
            return None
        return extract_plan_and_code(text)
    except LLMError as e:
        logger.debug("Remote completion failed (%s): %s", provider.get_name(), e)
        return None
    except Exception as e:
        logger.debug("Unexpected remote completion error: %s", e, exc_info=True)
        return None
