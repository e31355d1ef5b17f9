"""
Traycer Lite Settings Module

Provides configuration loading:
- Settings: Runtime settings dataclass
- SettingsStorage: YAML file plus environment overrides
"""

from .models import DEFAULT_BASE_URL, DEFAULT_MODEL, Settings
from .storage import API_KEY_ENV, SettingsStorage, load_settings

__all__ = [
    "API_KEY_ENV",
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "Settings",
    "SettingsStorage",
    "load_settings",
]
