"""Models for the podman driver."""

from .command import Command, ExecutedCommand
from .context import ContainerContext, PodmanContext
from .descriptor import ExecutionDescriptor, Mount
from .settings import PodmanSettings

__all__ = [
    'Command',
    'ExecutedCommand',
    'ContainerContext',
    'PodmanContext',
    'ExecutionDescriptor',
    'Mount',
    'PodmanSettings'
]
