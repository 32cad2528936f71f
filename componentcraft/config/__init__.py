"""Configuration management for componentcraft."""

from .loader import ConfigLoader, ConfigurationError
from .models import ComponentCraftConfig, GenerationConfig, LoggingConfig, UIConfig

__all__ = [
    "ComponentCraftConfig",
    "GenerationConfig",
    "UIConfig",
    "LoggingConfig",
    "ConfigLoader",
    "ConfigurationError",
]
