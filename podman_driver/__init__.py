"""Podman driver - compile execution descriptors into podman invocations."""

__version__ = "0.1.0"

# Services first: the compiler imports the exception types from there
from .services import (
    PodmanService,
    ParallaxService,
    LoggableRunner,
    get_container_pid,
    get_container_pid_from_default_file,
)
from .models import (
    Command,
    ContainerContext,
    ExecutedCommand,
    ExecutionDescriptor,
    Mount,
    PodmanContext,
)

__all__ = [
    'PodmanService',
    'ParallaxService',
    'LoggableRunner',
    'get_container_pid',
    'get_container_pid_from_default_file',
    'Command',
    'ContainerContext',
    'ExecutedCommand',
    'ExecutionDescriptor',
    'Mount',
    'PodmanContext',
]
