"""Parallax service for migrating images into podman's read-only store."""

import logging

from ..core import commands
from ..core.constants import PARALLAX_MIGRATE, PARALLAX_RMI
from ..models.context import PathValue, PodmanContext
from .exceptions import ParallaxCommandError
from .podman_service import execute

logger = logging.getLogger(__name__)


class ParallaxService:
    """Service for parallax operations on podman's graphroot and read-only store."""

    def __init__(self, parallax_path: PathValue, podman_ctx: PodmanContext):
        """Initialize parallax service.

        Args:
            parallax_path: Path to the parallax executable
            podman_ctx: Context providing graphroot and ro_store
        """
        self.parallax_path = parallax_path
        self.podman_ctx = podman_ctx

    def _execute(self, image: str, action: str) -> None:
        """Run one parallax action and check its exit status.

        Raises:
            ConfigurationError: If graphroot or ro_store is missing
            ParallaxCommandError: If parallax exits with non-zero status
        """
        command = commands.parallax(self.parallax_path, self.podman_ctx, image, action)
        result = execute(command)

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            logger.warning(f"parallax {action} {image} failed: {stderr}")
            raise ParallaxCommandError(action, result.returncode, stderr)
        logger.info(f"parallax {action} succeeded for image: {image}")

    def migrate(self, image: str) -> None:
        """Migrate an image from the graphroot into the read-only store."""
        self._execute(image, PARALLAX_MIGRATE)

    def rmi(self, image: str) -> None:
        """Remove an image from the read-only store."""
        self._execute(image, PARALLAX_RMI)
