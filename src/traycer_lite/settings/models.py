"""
Settings data model for Traycer Lite.

Settings only cover the optional remote completion and logging. The API key
is carried here at runtime but is never persisted.
"""

from dataclasses import dataclass, field

DEFAULT_MODEL = "HuggingFaceH4/zephyr-7b-beta"
DEFAULT_BASE_URL = "https://api-inference.huggingface.co/models"


@dataclass
class Settings:
    """
    Runtime settings for Traycer Lite.

    Attributes:
        model: Hugging Face model id used for remote completion.
        base_url: Inference API base URL; the model id is appended to it.
        timeout: Remote request timeout in seconds.
        log_level: Logging level name for stderr diagnostics.
        api_key: Hugging Face API key, read from the environment only.
    """

    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 60.0
    log_level: str = "WARNING"
    api_key: str | None = field(default=None, repr=False)

    @property
    def has_api_key(self) -> bool:
        """Whether remote completion can be attempted."""
        return bool(self.api_key)
