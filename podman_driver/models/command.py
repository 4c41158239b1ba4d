"""Compiled command and execution result models."""

import os
import subprocess
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from ..core.constants import UNPRINTABLE_ARG

Arg = Union[str, bytes]


def _display_arg(arg: Arg) -> str:
    """Render one argument as text, or a placeholder if it is not valid UTF-8."""
    try:
        if isinstance(arg, bytes):
            return arg.decode("utf-8")
        # Surrogate-escaped str (undecodable bytes from the OS) fails here
        arg.encode("utf-8")
        return arg
    except UnicodeError:
        return UNPRINTABLE_ARG


@dataclass
class Command:
    """A fully compiled external invocation, ready for ``subprocess``.

    ``env`` holds ordered overrides applied on top of the caller's
    environment for the child process only.
    """

    program: Arg
    args: List[Arg] = field(default_factory=list)
    env: List[Tuple[Arg, Arg]] = field(default_factory=list)

    @property
    def argv(self) -> List[Arg]:
        return [self.program, *self.args]

    def child_env(self) -> Optional[Dict[bytes, bytes]]:
        """Environment for the child process, or None to inherit unchanged."""
        if not self.env:
            return None
        environ = {os.fsencode(k): os.fsencode(v) for k, v in os.environ.items()}
        for key, value in self.env:
            environ[os.fsencode(key)] = os.fsencode(value)
        return environ

    def display(self) -> str:
        """Human-readable rendering of program and arguments for logs."""
        return " ".join(_display_arg(arg) for arg in self.argv)


@dataclass
class ExecutedCommand:
    """Display string of a command together with its captured result."""

    command: str
    output: subprocess.CompletedProcess

    @property
    def returncode(self) -> int:
        return self.output.returncode

    @property
    def success(self) -> bool:
        return self.output.returncode == 0
