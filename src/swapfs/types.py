"""Value types: DirectoryEntry, CallRecord."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One entry yielded by ``list()``.

    Attributes:
        name: Entry basename.
        is_directory: True if the entry is a directory.
        is_file: True if the entry is a regular file.
        is_symlink: True if the entry is a symbolic link (not followed).
    """

    name: str
    is_directory: bool
    is_file: bool
    is_symlink: bool


@dataclass(frozen=True, slots=True)
class CallRecord:
    """Immutable record of one facade operation invocation.

    Attributes:
        method_name: Name of the operation that was called.
        args: Positional arguments, in call order.
        timestamp: Milliseconds since the epoch when the call was made.
    """

    method_name: str
    args: tuple[Any, ...] = ()
    timestamp: int = field(default_factory=_now_ms)
