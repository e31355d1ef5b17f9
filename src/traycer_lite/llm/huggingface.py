"""
Hugging Face LLM Provider

Calls the hosted Hugging Face inference API over HTTP with aiohttp.
"""

import asyncio
from typing import Any

import aiohttp

from ..settings.models import DEFAULT_BASE_URL, DEFAULT_MODEL
from .base import (
    AuthenticationError,
    LLMError,
    LLMProvider,
    ModelNotFoundError,
    RateLimitError,
)


class HuggingFaceProvider(LLMProvider):
    """
    LLM provider for the Hugging Face inference API.

    Sends ``{"inputs": prompt}`` to ``<base_url>/<model>`` with bearer
    authentication and returns the decoded JSON body.

    Example:
        provider = HuggingFaceProvider(api_key="hf_...")
        data = await provider.generate_text("implement debounce(fn, wait)")
    """

    DEFAULT_MODEL = DEFAULT_MODEL
    DEFAULT_BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float = 60.0,
    ):
        """
        Initialize the Hugging Face provider.

        Args:
            api_key: Hugging Face API token
            model: Model identifier (uses DEFAULT_MODEL if not provided)
            base_url: Inference API URL (uses DEFAULT_BASE_URL if not provided)
            timeout: Request timeout in seconds
        """
        base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        super().__init__(api_key=api_key, model=model, base_url=base_url)
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        """Full URL of the model inference endpoint."""
        return f"{self.base_url}/{self.model}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def generate_text(self, prompt: str) -> Any:
        """
        Send one inference request.

        Args:
            prompt: Input text

        Returns:
            Decoded JSON response body (a list or a dict)

        Raises:
            AuthenticationError: On 401/403
            ModelNotFoundError: On 404
            RateLimitError: On 429
            LLMError: On any other failure
        """
        if not self.api_key:
            raise AuthenticationError("Hugging Face API key not provided", provider="huggingface")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.endpoint,
                    json={"inputs": prompt},
                    headers=self._headers(),
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise self._status_error(response.status, error_text)
                    try:
                        return await response.json(content_type=None)
                    except ValueError:
                        raise LLMError(
                            "Response body is not valid JSON",
                            provider="huggingface",
                            status_code=response.status
                        )

        except aiohttp.ClientConnectorError:
            raise LLMError(
                f"Cannot connect to {self.base_url}",
                provider="huggingface"
            )
        except asyncio.TimeoutError:
            raise LLMError(
                f"Request timed out after {self.timeout}s",
                provider="huggingface"
            )
        except aiohttp.ClientError as e:
            raise LLMError(f"HTTP error: {e}", provider="huggingface")

    def _status_error(self, status: int, error_text: str) -> LLMError:
        if status in (401, 403):
            return AuthenticationError(
                "Hugging Face rejected the API key",
                provider="huggingface",
                status_code=status
            )
        if status == 404:
            return ModelNotFoundError(
                f"Model '{self.model}' not found",
                provider="huggingface",
                status_code=status
            )
        if status == 429:
            return RateLimitError(
                "Hugging Face rate limit exceeded",
                provider="huggingface",
                status_code=status
            )
        return LLMError(
            f"Hugging Face API error ({status}): {error_text}",
            provider="huggingface",
            status_code=status
        )

    def get_name(self) -> str:
        return "huggingface"

    def get_default_model(self) -> str:
        return self.DEFAULT_MODEL
