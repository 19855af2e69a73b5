"""Path validation helpers for disk-backed implementations."""

from __future__ import annotations

import os

MAX_PATH_LENGTH = 4096
MAX_NAME_LENGTH = 255


def validate_path(path: object) -> tuple[bool, str]:
    """Validate a host path for type and basic safety issues.

    Returns:
        (is_valid, error_message) - error_message is empty if valid
    """
    if not isinstance(path, (str, os.PathLike)):
        return False, f"Path must be a string or path-like object, got {type(path).__name__}"

    path = os.fspath(path)
    if not isinstance(path, str):
        return False, "Path must not be a bytes path"

    if not path:
        return False, "Path must not be empty"

    if "\x00" in path:
        return False, "Path contains null bytes"

    if len(path) > MAX_PATH_LENGTH:
        return False, f"Path too long (max {MAX_PATH_LENGTH} characters)"

    name = os.path.basename(path.rstrip("/\\"))
    if len(name) > MAX_NAME_LENGTH:
        return False, f"Filename too long (max {MAX_NAME_LENGTH} characters)"

    return True, ""


def check_path(path: object) -> str:
    """Return *path* as a ``str``, raising if it fails :func:`validate_path`.

    Raises:
        TypeError: *path* is not a str or os.PathLike of str.
        ValueError: *path* is empty, too long, or contains null bytes.
    """
    valid, error = validate_path(path)
    if not valid:
        if not isinstance(path, (str, os.PathLike)) or not isinstance(os.fspath(path), str):
            raise TypeError(error)
        raise ValueError(error)
    return os.fspath(path)  # type: ignore[arg-type]


def is_bytes_like(data: object) -> bool:
    """True for the binary payloads ``write`` accepts."""
    return isinstance(data, (bytes, bytearray, memoryview))
