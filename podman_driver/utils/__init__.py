"""Utilities for the podman driver."""

from .config_manager import ConfigManager

__all__ = [
    'ConfigManager'
]
