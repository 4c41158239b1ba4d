"""Tests for configuration management."""

import json

import pytest

from podman_driver.models.settings import PodmanSettings
from podman_driver.services.exceptions import ConfigurationError
from podman_driver.services.parallax_service import ParallaxService
from podman_driver.utils.config_manager import ConfigManager


class TestConfigManager:
    """Test cases for ConfigManager."""

    def test_missing_file(self, tmp_path):
        """Test that a missing file yields no settings."""
        manager = ConfigManager(tmp_path / "podman.json")
        assert manager.get_settings() is None
        assert manager.get_context() is None

    def test_load_json(self, tmp_path):
        """Test loading JSON settings into a context."""
        config_file = tmp_path / "podman.json"
        config_file.write_text(json.dumps({
            "podman_path": "/usr/bin/podman",
            "module": "hpc",
            "graphroot": "/dev/shm/graphroot",
            "ro_store": "/scratch/store",
            "env": {"B": "2", "A": "1"},
        }))

        ctx = ConfigManager(config_file).get_context()

        assert ctx.podman_path == "/usr/bin/podman"
        assert ctx.module == "hpc"
        assert ctx.graphroot == "/dev/shm/graphroot"
        assert ctx.runroot is None
        assert ctx.ro_store == "/scratch/store"
        assert ctx.podman_env == [("B", "2"), ("A", "1")]

    def test_load_yaml(self, tmp_path):
        """Test loading YAML settings."""
        config_file = tmp_path / "podman.yaml"
        config_file.write_text(
            "runroot: /run/user/1000/containers\n"
            "parallax_path: /usr/local/bin/parallax\n"
        )

        settings = ConfigManager(config_file).get_settings()

        assert settings.runroot == "/run/user/1000/containers"
        assert settings.parallax_path == "/usr/local/bin/parallax"
        assert settings.to_context().podman_env is None

    def test_empty_yaml(self, tmp_path):
        """Test that an empty YAML file gives defaults."""
        config_file = tmp_path / "podman.yml"
        config_file.write_text("")
        assert ConfigManager(config_file).get_settings() == PodmanSettings()

    def test_invalid_json(self, tmp_path):
        """Test that unparsable files raise ConfigurationError."""
        config_file = tmp_path / "podman.json"
        config_file.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigManager(config_file).get_settings()

    def test_non_utf8_file(self, tmp_path):
        """Test that undecodable bytes raise ConfigurationError."""
        config_file = tmp_path / "podman.json"
        config_file.write_bytes(b'{"module": "\xff"}')
        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigManager(config_file).get_settings()

    def test_invalid_settings(self, tmp_path):
        """Test that invalid values raise ConfigurationError."""
        config_file = tmp_path / "podman.json"
        config_file.write_text(json.dumps({"env": ["not", "a", "mapping"]}))
        with pytest.raises(ConfigurationError, match="Invalid settings"):
            ConfigManager(config_file).get_settings()

    def test_save_and_reload(self, tmp_path):
        """Test that saved settings load back unchanged."""
        manager = ConfigManager(tmp_path / "nested" / "podman.json")
        settings = PodmanSettings(graphroot="/graphroot", env={"K": "V"})

        manager.save_settings(settings)

        assert manager.get_settings() == settings
        assert "runroot" not in json.loads(manager.config_file.read_text())

    def test_from_env(self, monkeypatch, tmp_path):
        """Test selecting the config file through the environment."""
        monkeypatch.delenv("PODMAN_DRIVER_CONFIG", raising=False)
        assert ConfigManager.from_env() is None

        monkeypatch.setenv("PODMAN_DRIVER_CONFIG", str(tmp_path / "podman.json"))
        assert ConfigManager.from_env().config_file == tmp_path / "podman.json"

    def test_get_parallax_service(self, tmp_path):
        """Test building a parallax service from the configured path."""
        config_file = tmp_path / "podman.json"
        config_file.write_text(json.dumps({
            "graphroot": "/dev/shm/graphroot",
            "ro_store": "/scratch/store",
            "parallax_path": "/usr/local/bin/parallax",
        }))

        service = ConfigManager(config_file).get_parallax_service()

        assert isinstance(service, ParallaxService)
        assert service.parallax_path == "/usr/local/bin/parallax"
        assert service.podman_ctx.graphroot == "/dev/shm/graphroot"
        assert service.podman_ctx.ro_store == "/scratch/store"

    def test_get_parallax_service_without_path(self, tmp_path):
        """Test that no parallax path means no parallax service."""
        config_file = tmp_path / "podman.json"
        config_file.write_text(json.dumps({"graphroot": "/dev/shm/graphroot"}))
        assert ConfigManager(config_file).get_parallax_service() is None
        assert ConfigManager(tmp_path / "missing.json").get_parallax_service() is None
