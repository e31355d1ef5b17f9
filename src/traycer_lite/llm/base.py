"""
LLM Provider Base Classes

Defines the abstract interface for text-generation providers and the error
types they raise.
"""

from abc import ABC, abstractmethod
from typing import Any


class LLMProvider(ABC):
    """
    Abstract base class for text-generation providers.

    Subclasses must implement:
    - generate_text(): Send a prompt and return the raw decoded response body
    - get_name(): Return the provider name
    - get_default_model(): Return the default model for this provider
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
    ):
        """
        Initialize the provider.

        Args:
            api_key: API key for authentication
            model: Model identifier to use (uses default if not specified)
            base_url: Base URL for API requests
        """
        self.api_key = api_key
        self._model = model
        self.base_url = base_url

    @property
    def model(self) -> str:
        """Get the model identifier to use."""
        return self._model or self.get_default_model()

    @abstractmethod
    async def generate_text(self, prompt: str) -> Any:
        """
        Send a prompt to the provider.

        Args:
            prompt: Input text

        Returns:
            Decoded JSON response body

        Raises:
            LLMError: If the request fails
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get the name of this provider."""
        pass

    @abstractmethod
    def get_default_model(self) -> str:
        """Get the default model for this provider."""
        pass


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        status_code: int | None = None,
        response: Any = None
    ):
        """
        Initialize LLM error.

        Args:
            message: Error message
            provider: Name of the provider that raised the error
            status_code: HTTP status code (if applicable)
            response: Raw response data (if available)
        """
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.response = response


class RateLimitError(LLMError):
    """Raised when rate limit is exceeded."""
    pass


class AuthenticationError(LLMError):
    """Raised when authentication fails."""
    pass


class ModelNotFoundError(LLMError):
    """Raised when the specified model is not available."""
    pass
