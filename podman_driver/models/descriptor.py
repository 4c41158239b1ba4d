"""Execution descriptor models consumed by the run compiler."""

from typing import Dict, List, Union

from pydantic import BaseModel, Field


class Mount(BaseModel):
    """A bind mount from the host into the container."""
    source: str
    destination: str
    options: List[str] = Field(default_factory=list)

    def to_volume_string(self) -> str:
        """Render as ``source:destination[:opt1,opt2]`` for ``--volume``."""
        volume = f"{self.source}:{self.destination}"
        if self.options:
            volume += ":" + ",".join(self.options)
        return volume


class ExecutionDescriptor(BaseModel):
    """Resolved description of a container workload.

    ``entrypoint`` keeps the image entrypoint when ``True``, clears it when
    ``False`` and replaces it when given a string.
    """
    image: str
    writable: bool = False
    entrypoint: Union[bool, str] = True
    workdir: str = ""
    mounts: List[Mount] = Field(default_factory=list)
    devices: List[str] = Field(default_factory=list)
    env: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)
