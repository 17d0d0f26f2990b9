"""Core configuration and factory components."""

from formflow.core.config import CredentialsConfig, Settings, get_settings
from formflow.core.factory import ComponentFactory

__all__ = [
    "CredentialsConfig",
    "Settings",
    "get_settings",
    "ComponentFactory",
]
