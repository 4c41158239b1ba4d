import subprocess
from pathlib import Path
from unittest.mock import Mock

import pytest

from podman_driver.models.context import ContainerContext, PodmanContext
from podman_driver.models.descriptor import ExecutionDescriptor, Mount


@pytest.fixture
def podman_ctx():
    """Provides a podman context with every optional field set."""
    return PodmanContext(
        podman_path=Path("/usr/bin/podman"),
        module="hpc",
        graphroot=Path("/dev/shm/sarus-test/graphroot"),
        runroot=Path("/dev/shm/sarus-test/runroot"),
        mount_program=Path("/usr/local/sarus-test/parallax_mount_program"),
        ro_store=Path("/scratch/user/parallax/store"),
    )


@pytest.fixture
def container_ctx():
    """Provides a detached, interactive container context with a pidfile."""
    return ContainerContext(
        name="edf_test",
        interactive=True,
        detach=True,
        set_env=True,
        pidfile=Path("/tmp/test/pidfile"),
    )


@pytest.fixture
def descriptor():
    """Provides a read-only descriptor that clears the image entrypoint."""
    return ExecutionDescriptor(
        image="ubuntu:24.04",
        writable=False,
        entrypoint=False,
        workdir="/develop",
        mounts=[
            Mount(source="/home/user/test", destination="/develop"),
            Mount(source="/src2", destination="/dst2"),
        ],
        devices=["/dev/fuse", "nvidia.com/gpu=all"],
        env={"TEST_1": "EDF!", "TEST_2": "foobar"},
        annotations={
            "com.hooks.test1.enabled": "true",
            "com.hooks.test2.enabled": "false",
        },
    )


@pytest.fixture
def completed():
    """Factory for fake subprocess results."""
    def _completed(returncode=0, stdout=b"", stderr=b""):
        return subprocess.CompletedProcess(
            args=["podman"], returncode=returncode, stdout=stdout, stderr=stderr
        )
    return _completed


@pytest.fixture
def mock_run(monkeypatch, completed):
    """Replaces subprocess.run with a mock returning a successful result."""
    run = Mock(return_value=completed())
    monkeypatch.setattr(subprocess, "run", run)
    return run
