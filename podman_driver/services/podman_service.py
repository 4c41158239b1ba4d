"""Podman service for running compiled podman commands."""

import logging
import subprocess
from typing import Iterable, Optional

from ..core import commands
from ..models.command import Arg, Command
from ..models.context import ContainerContext, PodmanContext
from ..models.descriptor import ExecutionDescriptor
from .exceptions import SpawnError

logger = logging.getLogger(__name__)


def execute(command: Command, capture_output: bool = True) -> subprocess.CompletedProcess:
    """Spawn a compiled command and wait for it to finish.

    Args:
        command: Compiled command
        capture_output: Capture stdout and stderr as bytes

    Returns:
        Completed process result

    Raises:
        SpawnError: If the executable cannot be started
    """
    logger.debug(f"Executing: {command.display()}")
    try:
        return subprocess.run(
            command.argv,
            env=command.child_env(),
            check=False,
            capture_output=capture_output,
        )
    except OSError as e:
        raise SpawnError(f"Failed to execute {command.display()}: {e}") from e


class PodmanService:
    """Service for podman operations.

    The optional context is only read, never modified; each call compiles a
    fresh command from it and spawns exactly one podman process.
    """

    def __init__(self, podman_ctx: Optional[PodmanContext] = None):
        """Initialize podman service.

        Args:
            podman_ctx: Runtime configuration (defaults to plain ``podman``)
        """
        self.podman_ctx = podman_ctx

    def execute(self, command: Command) -> int:
        """Run a command to completion with inherited stdio.

        Returns:
            Exit status of the command
        """
        return execute(command, capture_output=False).returncode

    def execute_output(self, command: Command) -> subprocess.CompletedProcess:
        """Run a command to completion, capturing stdout and stderr."""
        return execute(command)

    def run(self, args: Iterable[Arg]) -> int:
        """Run ``podman run`` with raw arguments.

        Args:
            args: Arguments following the ``run`` subcommand

        Returns:
            Exit status of podman
        """
        return self.execute(commands.run_with_args(args, self.podman_ctx))

    def run_output(self, args: Iterable[Arg]) -> subprocess.CompletedProcess:
        return self.execute_output(commands.run_with_args(args, self.podman_ctx))

    def run_from_descriptor(
        self,
        descriptor: ExecutionDescriptor,
        container_ctx: ContainerContext,
        container_cmd: Iterable[Arg] = (),
    ) -> int:
        """Run a container described by an execution descriptor.

        Args:
            descriptor: Resolved workload description
            container_ctx: Container name and run-time flags
            container_cmd: Command executed inside the container

        Returns:
            Exit status of podman
        """
        return self.execute(
            commands.run_from_descriptor(
                descriptor, self.podman_ctx, container_ctx, container_cmd
            )
        )

    def run_from_descriptor_output(
        self,
        descriptor: ExecutionDescriptor,
        container_ctx: ContainerContext,
        container_cmd: Iterable[Arg] = (),
    ) -> subprocess.CompletedProcess:
        return self.execute_output(
            commands.run_from_descriptor(
                descriptor, self.podman_ctx, container_ctx, container_cmd
            )
        )

    def pull(self, image: str) -> subprocess.CompletedProcess:
        """Pull an image. The exit status is left to the caller."""
        result = self.execute_output(commands.pull(image, self.podman_ctx))
        logger.info(f"podman pull {image} exited with {result.returncode}")
        return result

    def rmi(self, image: str) -> subprocess.CompletedProcess:
        result = self.execute_output(commands.rmi(image, self.podman_ctx))
        logger.info(f"podman rmi {image} exited with {result.returncode}")
        return result

    def rm(self, name: str) -> subprocess.CompletedProcess:
        result = self.execute_output(commands.rm(name, self.podman_ctx))
        logger.info(f"podman rm {name} exited with {result.returncode}")
        return result

    def stop(self, name: str) -> subprocess.CompletedProcess:
        result = self.execute_output(commands.stop(name, self.podman_ctx))
        logger.info(f"podman stop {name} exited with {result.returncode}")
        return result

    def images(self) -> int:
        """List images on the terminal.

        Returns:
            Exit status of podman
        """
        return self.execute(commands.images(self.podman_ctx))

    def image_exists(self, image: str) -> bool:
        """Check if an image exists in any configured store."""
        return self.execute_output(commands.image_exists(image, self.podman_ctx)).returncode == 0

    def inspect(self, target: str, format: Optional[str] = None) -> subprocess.CompletedProcess:
        """Inspect a container or image.

        Args:
            target: Container or image name/id
            format: Go template passed with ``-f``

        Returns:
            Completed process result with captured output
        """
        return self.execute_output(commands.inspect(target, format, self.podman_ctx))

    def info(self, format: Optional[str] = None) -> subprocess.CompletedProcess:
        return self.execute_output(commands.info(format, self.podman_ctx))

    def version(self, module: Optional[str] = None) -> subprocess.CompletedProcess:
        """Query the podman version. Root paths of the context are not used."""
        return self.execute_output(commands.version(module))
