"""Service layer for running podman and parallax commands."""

from .exceptions import (
    PodmanDriverError,
    ConfigurationError,
    SpawnError,
    PodmanCommandError,
    ParallaxCommandError,
    PidParseError,
    PidfileReadError,
)
from .podman_service import PodmanService
from .parallax_service import ParallaxService
from .loggable import LoggableRunner
from .pid_resolver import get_container_pid, get_container_pid_from_default_file

__all__ = [
    "PodmanService",
    "ParallaxService",
    "LoggableRunner",
    "get_container_pid",
    "get_container_pid_from_default_file",
    "PodmanDriverError",
    "ConfigurationError",
    "SpawnError",
    "PodmanCommandError",
    "ParallaxCommandError",
    "PidParseError",
    "PidfileReadError",
]
