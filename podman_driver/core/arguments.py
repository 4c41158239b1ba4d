"""Helpers for appending options to a podman argument list.

Values are kept as ``str`` or ``bytes`` exactly as given (path-like objects
go through ``os.fspath``), so paths and environment values that are not
valid UTF-8 survive unchanged all the way to ``execve``.
"""

import os
from typing import List, Optional, Union

from .constants import STORAGE_OPT_FLAG

Arg = Union[str, bytes]
ArgValue = Union[str, bytes, "os.PathLike"]


def key_val(key: ArgValue, val: ArgValue) -> Arg:
    """Build ``<key>=<val>`` without assuming either side is text.

    Returns ``str`` when both operands are text, ``bytes`` otherwise.
    """
    key = os.fspath(key)
    val = os.fspath(val)
    if isinstance(key, str) and isinstance(val, str):
        return key + "=" + val
    return os.fsencode(key) + b"=" + os.fsencode(val)


def cli_flag(args: List[Arg], on: bool, name: str) -> None:
    if on:
        args.append(name)


def cli_opt(args: List[Arg], name: str, val: Optional[ArgValue]) -> None:
    if val is not None:
        args.append(name)
        args.append(os.fspath(val))


def cli_kv(args: List[Arg], name: str, key: ArgValue, val: ArgValue) -> None:
    args.append(name)
    args.append(key_val(key, val))


def cli_storage_opt(args: List[Arg], name: str, val: Optional[ArgValue]) -> None:
    if val is not None:
        cli_kv(args, STORAGE_OPT_FLAG, name, val)
