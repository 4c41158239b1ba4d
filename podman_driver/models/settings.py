"""Persisted podman driver settings."""

from typing import Dict, Optional
from pydantic import BaseModel, Field

from ..core.constants import DEFAULT_PODMAN
from .context import PodmanContext


class PodmanSettings(BaseModel):
    """Podman driver settings as stored in a config file."""
    podman_path: str = DEFAULT_PODMAN
    module: Optional[str] = None
    graphroot: Optional[str] = None
    runroot: Optional[str] = None
    ro_store: Optional[str] = None
    mount_program: Optional[str] = None
    env: Dict[str, str] = Field(default_factory=dict)
    parallax_path: Optional[str] = None

    def to_context(self) -> PodmanContext:
        """Build the runtime context; env overrides keep file order."""
        return PodmanContext(
            podman_path=self.podman_path,
            module=self.module,
            graphroot=self.graphroot,
            runroot=self.runroot,
            ro_store=self.ro_store,
            mount_program=self.mount_program,
            podman_env=list(self.env.items()) or None,
        )
