"""Custom exceptions for the podman driver."""

from typing import Optional


class PodmanDriverError(Exception):
    """Base exception for all driver-related errors."""

    pass


class ConfigurationError(PodmanDriverError):
    """Exception raised when a context or config file lacks required data."""

    pass


class SpawnError(PodmanDriverError):
    """Exception raised when an external executable cannot be started."""

    pass


class PodmanCommandError(PodmanDriverError):
    """Exception raised when an external command exits with non-zero status."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ParallaxCommandError(PodmanCommandError):
    """Exception raised when the parallax migration tool fails."""

    def __init__(self, action: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(f"parallax {action} failed: {stderr}", returncode, stderr)
        self.action = action


class PidParseError(PodmanDriverError):
    """Exception raised when a PID cannot be parsed from command or file output."""

    def __init__(self, value):
        super().__init__(f"Invalid container PID: {value!r}")
        self.value = value


class PidfileReadError(PodmanDriverError):
    """Exception raised when a container pidfile cannot be read."""

    def __init__(self, path, reason: str):
        super().__init__(f"Failed to read pidfile {path}: {reason}")
        self.path = path
