"""FileSystemImpl protocol and runtime capability queries.

Every operation on the protocol is optional.  Implementations conform
structurally and may provide any subset; the facade checks for each
operation at call time with :func:`has_operation` rather than validating
an implementation as a whole when it is installed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import builtins
    import os
    from collections.abc import AsyncIterable

    from .types import DirectoryEntry

    PathArg = str | os.PathLike[str]

OPERATIONS: tuple[str, ...] = (
    "text",
    "json",
    "bytes",
    "array_buffer",
    "write",
    "is_file",
    "is_directory",
    "create_directory",
    "delete",
    "delete_all",
    "list",
    "size",
    "copy",
    "copy_all",
    "move",
)


class FileSystemImpl(Protocol):
    """Full shape of a filesystem implementation.

    Not runtime-checkable on purpose: partial implementations are valid,
    so conformance is decided one operation at a time.
    """

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def text(self, path: PathArg) -> str | None:
        """File contents decoded as text, or None if the file is absent."""
        ...

    async def json(self, path: PathArg) -> Any:
        """File contents parsed as JSON, or None if the file is absent."""
        ...

    async def bytes(self, path: PathArg) -> builtins.bytes | None:
        """Raw file contents, or None if the file is absent."""
        ...

    async def array_buffer(self, path: PathArg) -> builtins.bytes | None:
        """Deprecated alias of :meth:`bytes`."""
        ...

    async def is_file(self, path: PathArg) -> bool: ...

    async def is_directory(self, path: PathArg) -> bool: ...

    def list(self, path: PathArg) -> AsyncIterable[DirectoryEntry]:
        """Entries of the directory at *path*."""
        ...

    async def size(self, path: PathArg) -> int | None:
        """Size in bytes, or None if the file is absent."""
        ...

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def write(
        self,
        path: PathArg,
        data: str | builtins.bytes | bytearray | memoryview,
    ) -> None: ...

    async def create_directory(self, path: PathArg) -> None: ...

    async def delete(self, path: PathArg) -> None:
        """Delete a file or an empty directory."""
        ...

    async def delete_all(self, path: PathArg) -> None:
        """Delete a file or a directory recursively."""
        ...

    async def copy(self, src: PathArg, dest: PathArg) -> None: ...

    async def copy_all(self, src: PathArg, dest: PathArg) -> None: ...

    async def move(self, src: PathArg, dest: PathArg) -> None: ...


def has_operation(impl: Any, name: str) -> bool:
    """Return True if *impl* exposes a callable member called *name*."""
    return callable(getattr(impl, name, None))


def supported_operations(impl: Any) -> tuple[str, ...]:
    """Return the subset of :data:`OPERATIONS` that *impl* provides."""
    return tuple(op for op in OPERATIONS if has_operation(impl, op))
