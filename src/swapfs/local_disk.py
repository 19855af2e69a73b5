"""LocalDiskImpl — direct host filesystem access."""

from __future__ import annotations

import asyncio
import json as jsonlib
import os
import shutil
import stat
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .facade import SwapFS
from .types import DirectoryEntry
from .utils import check_path, is_bytes_like

if TYPE_CHECKING:
    import builtins
    from collections.abc import AsyncIterator

    PathArg = str | os.PathLike[str]


class LocalDiskImpl:
    """Full filesystem implementation backed by the host disk.

    Blocking calls run in a worker thread via ``asyncio.to_thread``.
    A missing file is a normal outcome for reads, size and existence
    checks (``None``/``False``); every other ``OSError`` propagates.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    # =========================================================================
    # Read Operations
    # =========================================================================

    async def text(self, path: PathArg) -> str | None:
        """Read a file as text, or None if it does not exist."""
        resolved = Path(check_path(path))
        try:
            return await asyncio.to_thread(resolved.read_text, self.encoding)
        except FileNotFoundError:
            return None

    async def json(self, path: PathArg) -> Any:
        """Read a file and parse it as JSON, or None if it does not exist."""
        content = await self.text(path)
        if content is None:
            return None
        return jsonlib.loads(content)

    async def bytes(self, path: PathArg) -> builtins.bytes | None:
        """Read a file as bytes, or None if it does not exist."""
        resolved = Path(check_path(path))
        try:
            return await asyncio.to_thread(resolved.read_bytes)
        except FileNotFoundError:
            return None

    async def array_buffer(self, path: PathArg) -> builtins.bytes | None:
        """Deprecated alias of :meth:`bytes`."""
        return await self.bytes(path)

    async def is_file(self, path: PathArg) -> bool:
        resolved = Path(check_path(path))
        try:
            st = await asyncio.to_thread(resolved.stat)
        except FileNotFoundError:
            return False
        return stat.S_ISREG(st.st_mode)

    async def is_directory(self, path: PathArg) -> bool:
        resolved = Path(check_path(path))
        try:
            st = await asyncio.to_thread(resolved.stat)
        except FileNotFoundError:
            return False
        return stat.S_ISDIR(st.st_mode)

    async def list(self, path: PathArg) -> AsyncIterator[DirectoryEntry]:
        """Yield the entries of a directory without following symlinks."""
        resolved = check_path(path)

        def _scan() -> list[DirectoryEntry]:
            with os.scandir(resolved) as it:
                return [
                    DirectoryEntry(
                        name=entry.name,
                        is_directory=entry.is_dir(follow_symlinks=False),
                        is_file=entry.is_file(follow_symlinks=False),
                        is_symlink=entry.is_symlink(),
                    )
                    for entry in it
                ]

        for entry in await asyncio.to_thread(_scan):
            yield entry

    async def size(self, path: PathArg) -> int | None:
        """Size of a file in bytes, or None if it does not exist."""
        resolved = Path(check_path(path))
        try:
            st = await asyncio.to_thread(resolved.stat)
        except FileNotFoundError:
            return None
        return st.st_size

    # =========================================================================
    # Write Operations
    # =========================================================================

    async def write(
        self,
        path: PathArg,
        data: str | builtins.bytes | bytearray | memoryview,
    ) -> None:
        """Write text or binary data, creating parent directories as needed."""
        resolved = Path(check_path(path))

        if isinstance(data, str):
            payload = data.encode(self.encoding)
        elif is_bytes_like(data):
            payload = bytes(data)
        else:
            raise TypeError(
                f"Data must be str or bytes-like, got {type(data).__name__}"
            )

        def _write() -> None:
            try:
                resolved.write_bytes(payload)
            except FileNotFoundError:
                resolved.parent.mkdir(parents=True, exist_ok=True)
                resolved.write_bytes(payload)

        await asyncio.to_thread(_write)

    async def create_directory(self, path: PathArg) -> None:
        """Create a directory and any missing parents."""
        resolved = Path(check_path(path))
        await asyncio.to_thread(resolved.mkdir, parents=True, exist_ok=True)

    async def delete(self, path: PathArg) -> None:
        """Delete a file or an empty directory."""
        resolved = Path(check_path(path))

        def _delete() -> None:
            if resolved.is_dir() and not resolved.is_symlink():
                resolved.rmdir()
            else:
                resolved.unlink()

        await asyncio.to_thread(_delete)

    async def delete_all(self, path: PathArg) -> None:
        """Delete a file or a directory recursively."""
        resolved = Path(check_path(path))

        def _delete() -> None:
            if resolved.is_dir() and not resolved.is_symlink():
                shutil.rmtree(resolved)
            else:
                resolved.unlink()

        await asyncio.to_thread(_delete)

    async def copy(self, src: PathArg, dest: PathArg) -> None:
        """Copy a single file."""
        src_resolved = Path(check_path(src))
        dest_resolved = Path(check_path(dest))

        def _copy() -> None:
            if src_resolved.is_dir():
                raise IsADirectoryError(f"Cannot copy a directory: {src_resolved}")
            shutil.copyfile(src_resolved, dest_resolved)

        await asyncio.to_thread(_copy)

    async def copy_all(self, src: PathArg, dest: PathArg) -> None:
        """Copy a file, or a directory and everything under it."""
        src_resolved = Path(check_path(src))
        dest_resolved = Path(check_path(dest))

        def _copy() -> None:
            if src_resolved.is_dir():
                shutil.copytree(src_resolved, dest_resolved, dirs_exist_ok=True)
                return
            dest_resolved.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src_resolved, dest_resolved)

        await asyncio.to_thread(_copy)

    async def move(self, src: PathArg, dest: PathArg) -> None:
        """Move a file.  Directory sources and destinations are refused."""
        src_resolved = Path(check_path(src))
        dest_resolved = Path(check_path(dest))

        def _move() -> None:
            if src_resolved.is_dir():
                raise IsADirectoryError(f"Cannot move a directory: {src_resolved}")
            if dest_resolved.is_dir():
                raise IsADirectoryError(f"Destination is a directory: {dest_resolved}")
            shutil.move(src_resolved, dest_resolved)

        await asyncio.to_thread(_move)


class LocalSwapFS(SwapFS):
    """SwapFS whose base implementation is the host disk.

    Usage::

        fs = LocalSwapFS()
        if await fs.is_file("config.json"):
            config = await fs.json("config.json")
    """

    def __init__(self, *, impl: Any = None) -> None:
        super().__init__(impl=impl if impl is not None else LocalDiskImpl())
