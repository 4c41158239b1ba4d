"""Variants of podman operations that also report the executed command line.

Useful when the caller wants to log exactly what was run alongside its
output, e.g. when a container fails to start.
"""

from typing import Iterable, Optional

from ..core import commands
from ..core.constants import PARALLAX_MIGRATE
from ..models.command import Arg, Command, ExecutedCommand
from ..models.context import ContainerContext, PathValue, PodmanContext
from ..models.descriptor import ExecutionDescriptor
from .exceptions import ConfigurationError
from .podman_service import execute


def _run(command: Command) -> ExecutedCommand:
    return ExecutedCommand(command=command.display(), output=execute(command))


class LoggableRunner:
    """Runs podman and parallax commands, returning :class:`ExecutedCommand`."""

    def __init__(self, podman_ctx: Optional[PodmanContext] = None):
        self.podman_ctx = podman_ctx

    def run_from_descriptor(
        self,
        descriptor: ExecutionDescriptor,
        container_ctx: ContainerContext,
        container_cmd: Iterable[Arg] = (),
    ) -> ExecutedCommand:
        return _run(
            commands.run_from_descriptor(
                descriptor, self.podman_ctx, container_ctx, container_cmd
            )
        )

    def pull(self, image: str) -> ExecutedCommand:
        return _run(commands.pull(image, self.podman_ctx))

    def rmi(self, image: str) -> ExecutedCommand:
        return _run(commands.rmi(image, self.podman_ctx))

    def stop(self, name: str) -> ExecutedCommand:
        return _run(commands.stop(name, self.podman_ctx))

    def image_exists(self, image: str) -> ExecutedCommand:
        return _run(commands.image_exists(image, self.podman_ctx))

    def parallax_migrate(self, parallax_path: PathValue, image: str) -> ExecutedCommand:
        """Run ``parallax --migrate`` without checking its exit status.

        Raises:
            ConfigurationError: If the context lacks graphroot or ro_store
        """
        if self.podman_ctx is None:
            raise ConfigurationError("parallax migrate requires a podman context")
        return _run(commands.parallax(parallax_path, self.podman_ctx, image, PARALLAX_MIGRATE))
