"""Resolve the host PID of a running container.

Two independent strategies are offered:

* :func:`get_container_pid` asks ``podman inspect`` for ``.State.Pid``.
* :func:`get_container_pid_from_default_file` reads the pidfile podman keeps
  for overlay-backed containers. With a known runroot this avoids spawning
  podman entirely and is much faster.

Both return the same value for a running, overlay-backed container. No
cross-check is performed here.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..core.constants import (
    INFO_RUNROOT_FORMAT,
    INSPECT_PID_FORMAT,
    MAX_PID,
    OVERLAY_CONTAINERS_DIR,
    PIDFILE_RELATIVE_PATH,
)
from ..models.context import PodmanContext
from .exceptions import PidfileReadError, PidParseError, PodmanCommandError
from .podman_service import PodmanService

logger = logging.getLogger(__name__)


def _parse_pid(text: str) -> int:
    """Parse an unsigned 32-bit decimal PID, rejecting signs and non-ASCII digits."""
    if not (text.isascii() and text.isdigit()):
        raise PidParseError(text)
    pid = int(text)
    if pid > MAX_PID:
        raise PidParseError(text)
    return pid


def _decode_stdout(raw: bytes) -> str:
    try:
        return raw.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise PidParseError(raw) from e


def _stderr_text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").strip()


def get_container_pid(name: str, podman_ctx: Optional[PodmanContext] = None) -> int:
    """Get a container's PID through ``podman inspect``.

    Podman reports ``0`` for a stopped container; that value is returned as-is.

    Args:
        name: Container name or id
        podman_ctx: Runtime configuration

    Returns:
        PID of the container's main process

    Raises:
        PodmanCommandError: If podman inspect exits with non-zero status
        PidParseError: If the output is not an unsigned integer
    """
    output = PodmanService(podman_ctx).inspect(name, INSPECT_PID_FORMAT)

    if output.returncode != 0:
        stderr = _stderr_text(output.stderr)
        logger.warning(f"podman inspect {name} failed: {stderr}")
        raise PodmanCommandError(
            f"podman inspect failed: {stderr}", output.returncode, stderr
        )

    # Podman prints a line like "12345\n"
    return _parse_pid(_decode_stdout(output.stdout))


def _default_runroot() -> str:
    # The default context is used on purpose: a caller with a custom context
    # already knows its runroot and can pass it directly.
    output = PodmanService().info(INFO_RUNROOT_FORMAT)
    if output.returncode != 0:
        stderr = _stderr_text(output.stderr)
        raise PodmanCommandError(f"podman info failed: {stderr}", output.returncode, stderr)
    try:
        return output.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        return os.fsdecode(output.stdout.strip())


def default_pidfile_path(
    container_id: str, runroot: Union[str, bytes, os.PathLike]
) -> Path:
    """Location of the pidfile podman writes for an overlay container."""
    return Path(os.fsdecode(runroot), OVERLAY_CONTAINERS_DIR, container_id, *PIDFILE_RELATIVE_PATH)


def get_container_pid_from_default_file(
    container_id: str,
    runroot: Optional[Union[str, bytes, os.PathLike]] = None,
) -> int:
    """Get a container's PID from podman's default pidfile.

    Only works when the container is running, no custom ``--pidfile`` was
    given to ``podman run`` and the storage driver is overlay. Otherwise the
    failure surfaces as a read or parse error.

    Args:
        container_id: Full container id
        runroot: Podman runroot; queried with ``podman info`` when omitted

    Returns:
        PID of the container's main process

    Raises:
        PodmanCommandError: If the runroot had to be queried and podman info failed
        PidfileReadError: If the pidfile is missing or unreadable
        PidParseError: If the pidfile content is not an unsigned integer
    """
    if runroot is None:
        runroot = _default_runroot()

    pidfile = default_pidfile_path(container_id, runroot)
    try:
        content = pidfile.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise PidfileReadError(pidfile, str(e)) from e

    return _parse_pid(content.rstrip())
