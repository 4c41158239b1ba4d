"""Configuration management utilities."""

import json
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..core.constants import CONFIG_ENV_VAR
from ..models.context import PodmanContext
from ..models.settings import PodmanSettings
from ..services.exceptions import ConfigurationError
from ..services.parallax_service import ParallaxService

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigManager:
    """Loads and saves podman driver settings from a JSON or YAML file."""

    def __init__(self, config_file: Path):
        """Initialize config manager."""
        self.config_file = Path(config_file)

    @classmethod
    def from_env(cls) -> Optional["ConfigManager"]:
        """Config manager for the file named by PODMAN_DRIVER_CONFIG, if set."""
        config_file = os.environ.get(CONFIG_ENV_VAR)
        if not config_file:
            return None
        return cls(Path(config_file))

    def _parse(self, text: str) -> dict:
        if self.config_file.suffix in YAML_SUFFIXES:
            return yaml.safe_load(text) or {}
        return json.loads(text)

    def get_settings(self) -> Optional[PodmanSettings]:
        """Load settings.

        Returns:
            Settings, or None if the config file does not exist

        Raises:
            ConfigurationError: If the file cannot be parsed or is invalid
        """
        if not self.config_file.exists():
            return None
        try:
            data = self._parse(self.config_file.read_text(encoding="utf-8"))
            return PodmanSettings(**data)
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError, TypeError) as e:
            raise ConfigurationError(f"Failed to parse {self.config_file}: {e}") from e
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings in {self.config_file}: {e}") from e

    def get_context(self) -> Optional[PodmanContext]:
        """Load settings and convert them to a podman context."""
        settings = self.get_settings()
        return settings.to_context() if settings else None

    def get_parallax_service(self) -> Optional[ParallaxService]:
        """Build a parallax service from the configured tool path and context.

        Returns:
            Parallax service, or None if no settings or no parallax_path exist
        """
        settings = self.get_settings()
        if settings is None or settings.parallax_path is None:
            return None
        return ParallaxService(settings.parallax_path, settings.to_context())

    def save_settings(self, settings: PodmanSettings):
        """Save settings as JSON, creating parent directories as needed."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(settings.model_dump_json(indent=2, exclude_none=True))
