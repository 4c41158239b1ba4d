"""Context models describing how podman and a container are invoked."""

import os
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

from ..core.constants import DEFAULT_PODMAN

PathValue = Union[str, bytes, os.PathLike]
EnvValue = Union[str, bytes]


@dataclass
class PodmanContext:
    """Runtime configuration for podman invocations.

    Every optional field left as ``None`` means podman falls back to its own
    default; nothing is emitted on the command line for it.
    ``podman_env`` holds ordered ``(key, value)`` overrides applied only to the
    spawned podman process.
    """

    podman_path: PathValue = DEFAULT_PODMAN
    module: Optional[str] = None
    graphroot: Optional[PathValue] = None
    runroot: Optional[PathValue] = None
    ro_store: Optional[PathValue] = None
    mount_program: Optional[PathValue] = None
    podman_env: Optional[List[Tuple[EnvValue, EnvValue]]] = None

    def with_env(self, key: EnvValue, value: EnvValue) -> "PodmanContext":
        """Return a copy with one more environment override appended.

        Example:
            ctx = PodmanContext(podman_path="/usr/bin/podman") \\
                .with_env("PARALLAX_MP_SQUASHFUSE_CMD", "/usr/bin/squashfuse_ll")
        """
        env = list(self.podman_env or [])
        env.append((key, value))
        return replace(self, podman_env=env)


@dataclass
class ContainerContext:
    """Per-container options for a run invocation."""

    name: str
    interactive: bool = False
    detach: bool = False
    # Consumed by the descriptor's env handling, never emitted as a flag
    set_env: bool = True
    pidfile: Optional[PathValue] = None
