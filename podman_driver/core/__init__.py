"""Core command compilation for the podman driver."""

from . import arguments, commands

__all__ = [
    'arguments',
    'commands'
]
