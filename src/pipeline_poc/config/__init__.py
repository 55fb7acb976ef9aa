"""Configuration package."""

from .settings import DEFAULT_SERVICE_NAMES, ServiceVariant, Settings, settings

__all__ = ["DEFAULT_SERVICE_NAMES", "ServiceVariant", "Settings", "settings"]
