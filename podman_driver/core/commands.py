"""Compile podman and parallax invocations into argument lists.

Every function here is pure: it builds a :class:`Command` from the given
contexts and never touches the filesystem or spawns anything. Argument order
is fixed; callers and tests rely on the exact positional layout.
"""

import os
from typing import Iterable, List, Optional

from ..models.command import Arg, Command
from ..models.context import ContainerContext, PathValue, PodmanContext
from ..models.descriptor import ExecutionDescriptor
from ..services.exceptions import ConfigurationError
from .arguments import cli_flag, cli_kv, cli_opt, cli_storage_opt
from .constants import ADDITIONAL_IMAGE_STORE, DEFAULT_PODMAN, MOUNT_PROGRAM


def base(podman_ctx: Optional[PodmanContext]) -> Command:
    """Program, root flags and environment shared by every podman call."""
    if podman_ctx is None:
        return Command(program=DEFAULT_PODMAN)

    cmd = Command(program=os.fspath(podman_ctx.podman_path))

    # Only applied to the child process environment
    if podman_ctx.podman_env:
        cmd.env.extend(podman_ctx.podman_env)

    cli_opt(cmd.args, "--root", podman_ctx.graphroot)
    cli_opt(cmd.args, "--runroot", podman_ctx.runroot)
    return cmd


def _with_ro_store(podman_ctx: Optional[PodmanContext]) -> Command:
    cmd = base(podman_ctx)
    if podman_ctx is not None:
        cli_storage_opt(cmd.args, ADDITIONAL_IMAGE_STORE, podman_ctx.ro_store)
    return cmd


def run(podman_ctx: Optional[PodmanContext]) -> Command:
    """Global options followed by the ``run`` subcommand."""
    cmd = base(podman_ctx)

    if podman_ctx is not None:
        cli_opt(cmd.args, "--module", podman_ctx.module)
        cli_storage_opt(cmd.args, ADDITIONAL_IMAGE_STORE, podman_ctx.ro_store)
        cli_storage_opt(cmd.args, MOUNT_PROGRAM, podman_ctx.mount_program)

    cmd.args.append("run")
    return cmd


def run_with_args(args: Iterable[Arg], podman_ctx: Optional[PodmanContext]) -> Command:
    """``podman ... run`` followed by caller-supplied raw arguments."""
    cmd = run(podman_ctx)
    cmd.args.extend(os.fspath(arg) for arg in args)
    return cmd


def _entrypoint_arg(entrypoint) -> Optional[str]:
    if entrypoint is True:
        return None
    if entrypoint is False:
        return "--entrypoint="
    return "--entrypoint=" + entrypoint


def run_from_descriptor(
    descriptor: ExecutionDescriptor,
    podman_ctx: Optional[PodmanContext],
    container_ctx: ContainerContext,
    container_cmd: Iterable[Arg],
) -> Command:
    """Compile a full ``podman run`` for an execution descriptor.

    Args:
        descriptor: Resolved workload description
        podman_ctx: Runtime configuration, or None for podman defaults
        container_ctx: Container name and run-time flags
        container_cmd: Command executed inside the container, appended last

    Returns:
        The compiled command
    """
    cmd = run(podman_ctx)
    args = cmd.args

    args.append("--rm")
    cli_flag(args, container_ctx.detach, "--detach")
    cli_flag(args, container_ctx.interactive, "-it")
    cli_flag(args, not descriptor.writable, "--read-only")

    cli_opt(args, "--name", container_ctx.name)
    cli_opt(args, "--pidfile", container_ctx.pidfile)

    entrypoint = _entrypoint_arg(descriptor.entrypoint)
    if entrypoint is not None:
        args.append(entrypoint)

    if descriptor.workdir:
        cli_opt(args, "--workdir", descriptor.workdir)
    for mount in descriptor.mounts:
        cli_opt(args, "--volume", mount.to_volume_string())
    for device in descriptor.devices:
        cli_opt(args, "--device", device)
    for key, val in descriptor.env.items():
        cli_kv(args, "--env", key, val)
    for key, val in descriptor.annotations.items():
        cli_kv(args, "--annotation", key, val)

    args.append(descriptor.image)
    args.extend(os.fspath(arg) for arg in container_cmd)
    return cmd


def pull(image: str, podman_ctx: Optional[PodmanContext]) -> Command:
    cmd = base(podman_ctx)
    cmd.args.extend(["pull", image])
    return cmd


def rmi(image: str, podman_ctx: Optional[PodmanContext]) -> Command:
    cmd = _with_ro_store(podman_ctx)
    cmd.args.extend(["rmi", image])
    return cmd


def rm(name: str, podman_ctx: Optional[PodmanContext]) -> Command:
    cmd = _with_ro_store(podman_ctx)
    cmd.args.extend(["rm", name])
    return cmd


def stop(name: str, podman_ctx: Optional[PodmanContext]) -> Command:
    cmd = _with_ro_store(podman_ctx)
    cmd.args.extend(["stop", name])
    return cmd


def image_exists(image: str, podman_ctx: Optional[PodmanContext]) -> Command:
    cmd = _with_ro_store(podman_ctx)
    cmd.args.extend(["image", "exists", image])
    return cmd


def images(podman_ctx: Optional[PodmanContext]) -> Command:
    cmd = _with_ro_store(podman_ctx)
    cmd.args.append("images")
    return cmd


def inspect(
    target: str, format: Optional[str], podman_ctx: Optional[PodmanContext]
) -> Command:
    """``podman inspect`` with warnings silenced and an optional Go template."""
    cmd = _with_ro_store(podman_ctx)
    cmd.args.extend(["--log-level=error", "inspect"])
    if format is not None:
        cmd.args.extend(["-f", format])
    cmd.args.append(target)
    return cmd


def info(format: Optional[str], podman_ctx: Optional[PodmanContext]) -> Command:
    cmd = base(podman_ctx)
    cmd.args.append("info")
    if format is not None:
        cmd.args.extend(["-f", format])
    return cmd


def version(module: Optional[str]) -> Command:
    # Version queries never touch runtime state, so root paths are not forwarded
    cmd = base(None)
    cli_opt(cmd.args, "--module", module)
    cmd.args.append("version")
    return cmd


def parallax(
    parallax_path: PathValue,
    podman_ctx: PodmanContext,
    image: str,
    action: str,
) -> Command:
    """Compile a parallax invocation operating on podman's stores.

    Raises:
        ConfigurationError: If graphroot or ro_store is missing from the context
    """
    if podman_ctx.graphroot is None:
        raise ConfigurationError(f"Missing graphroot for parallax {action}")
    if podman_ctx.ro_store is None:
        raise ConfigurationError(f"Missing read-only store path for parallax {action}")

    args: List[Arg] = []
    cli_opt(args, "--podmanRoot", podman_ctx.graphroot)
    cli_opt(args, "--roStoragePath", podman_ctx.ro_store)
    args.append(f"--{action}")
    cli_opt(args, "--image", image)
    return Command(program=os.fspath(parallax_path), args=args)
