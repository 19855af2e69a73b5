"""SwapFS — filesystem facade with call logging and implementation swapping."""

from __future__ import annotations

import inspect
import logging
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import ImplementationAlreadySetError, NoSuchMethodError
from .logs import LogRegistry
from .protocol import has_operation

if TYPE_CHECKING:
    import builtins
    import os
    from collections.abc import AsyncIterable, AsyncIterator, Awaitable

    from .types import CallRecord, DirectoryEntry

    PathArg = str | os.PathLike[str]

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Active implementation state
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class _Base:
    """No swap in effect; calls go to the base implementation."""


@dataclass(frozen=True, slots=True)
class _Swapped:
    """A substitute implementation is active."""

    impl: Any


_BASE = _Base()


async def _adapt_entries(result: Any) -> AsyncIterator[Any]:
    if inspect.isawaitable(result):
        result = await result
    if hasattr(result, "__aiter__"):
        async for entry in result:
            yield entry
    else:
        for entry in result:
            yield entry


class SwapFS:
    """Forwards filesystem operations to a swappable implementation.

    The base implementation is fixed at construction.  A test or caller
    may install one substitute with :meth:`set_impl` and must call
    :meth:`reset_impl` before installing another.  Every call, including
    swaps, is appended to each log opened with :meth:`log_start`.

    Dispatch is late-bound: the active implementation is checked for the
    requested operation only when that operation is called, so partial
    implementations work for whatever subset they provide.  Results and
    exceptions from the implementation are passed through untouched.

    Usage::

        fs = SwapFS(impl=LocalDiskImpl())
        fs.log_start("setup")
        await fs.write("/tmp/a.txt", "hello")
        records = fs.log_end("setup")
    """

    def __init__(self, *, impl: Any) -> None:
        self._base_impl = impl
        self._state: _Base | _Swapped = _BASE
        self._logs = LogRegistry()

    # ------------------------------------------------------------------
    # Implementation management
    # ------------------------------------------------------------------

    @property
    def base_impl(self) -> Any:
        """The implementation supplied at construction."""
        return self._base_impl

    @property
    def impl(self) -> Any:
        """The implementation currently receiving calls."""
        if isinstance(self._state, _Swapped):
            return self._state.impl
        return self._base_impl

    def is_base_impl(self) -> bool:
        """True if no substitute implementation is active."""
        return self.impl is self._base_impl

    def set_impl(self, impl: Any) -> None:
        """Make *impl* the active implementation.

        Raises:
            ImplementationAlreadySetError: A substitute is already active.
        """
        self._logs.record("set_impl", (impl,))

        if isinstance(self._state, _Swapped):
            raise ImplementationAlreadySetError

        if impl is not self._base_impl:
            self._state = _Swapped(impl)
        logger.debug("Implementation set to %r", impl)

    def reset_impl(self) -> None:
        """Return to the base implementation.  Safe to call when not swapped."""
        self._logs.record("reset_impl")
        self._state = _BASE
        logger.debug("Implementation reset to base %r", self._base_impl)

    # ------------------------------------------------------------------
    # Call logs
    # ------------------------------------------------------------------

    def log_start(self, name: str) -> None:
        """Start collecting calls into a new log called *name*."""
        self._logs.start(name)
        logger.debug("Started call log %r", name)

    def log_end(self, name: str) -> list[CallRecord]:
        """Stop the log called *name* and return its records.

        Data operations are recorded under their method names; swaps are
        recorded as ``set_impl`` (with the new implementation) and
        ``reset_impl`` (no arguments).
        """
        entries = self._logs.end(name)
        logger.debug("Ended call log %r with %d entries", name, len(entries))
        return entries

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _resolve(self, method_name: str) -> Any:
        impl = self.impl
        if not has_operation(impl, method_name):
            logger.debug("Active implementation %r has no %s()", impl, method_name)
            raise NoSuchMethodError(method_name)
        return getattr(impl, method_name)

    def _call(self, method_name: str, *args: Any) -> Awaitable[Any]:
        """Record the call now and return the awaitable that dispatches it."""
        self._logs.record(method_name, args)
        return self._dispatch(method_name, *args)

    async def _dispatch(self, method_name: str, *args: Any) -> Any:
        result = self._resolve(method_name)(*args)
        if inspect.isawaitable(result):
            return await result
        return result

    # ------------------------------------------------------------------
    # Read Operations
    #
    # Data operations log at call time and return an awaitable.
    # ------------------------------------------------------------------

    def text(self, path: PathArg) -> Awaitable[str | None]:
        """Read *path* as text.  None if the file does not exist."""
        return self._call("text", path)

    def json(self, path: PathArg) -> Awaitable[Any]:
        """Read *path* and parse it as JSON.  None if the file does not exist."""
        return self._call("json", path)

    def bytes(self, path: PathArg) -> Awaitable[builtins.bytes | None]:
        """Read *path* as raw bytes.  None if the file does not exist."""
        return self._call("bytes", path)

    def array_buffer(self, path: PathArg) -> Awaitable[builtins.bytes | None]:
        """Deprecated alias of :meth:`bytes`."""
        warnings.warn(
            "array_buffer() is deprecated, use bytes() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._call("array_buffer", path)

    def is_file(self, path: PathArg) -> Awaitable[bool]:
        return self._call("is_file", path)

    def is_directory(self, path: PathArg) -> Awaitable[bool]:
        return self._call("is_directory", path)

    def list(self, path: PathArg) -> AsyncIterator[DirectoryEntry]:
        """Iterate over the entries of the directory at *path*.

        The operation is checked immediately, and the returned iterator
        is consumed with ``async for``.
        """
        self._logs.record("list", (path,))
        result: AsyncIterable[DirectoryEntry] = self._resolve("list")(path)
        return _adapt_entries(result)

    def size(self, path: PathArg) -> Awaitable[int | None]:
        """Size of *path* in bytes.  None if the file does not exist."""
        return self._call("size", path)

    # ------------------------------------------------------------------
    # Write Operations
    # ------------------------------------------------------------------

    def write(
        self,
        path: PathArg,
        data: str | builtins.bytes | bytearray | memoryview,
    ) -> Awaitable[None]:
        return self._call("write", path, data)

    def create_directory(self, path: PathArg) -> Awaitable[None]:
        return self._call("create_directory", path)

    def delete(self, path: PathArg) -> Awaitable[None]:
        """Delete a file or an empty directory."""
        return self._call("delete", path)

    def delete_all(self, path: PathArg) -> Awaitable[None]:
        """Delete a file or a directory and everything under it."""
        return self._call("delete_all", path)

    def copy(self, src: PathArg, dest: PathArg) -> Awaitable[None]:
        return self._call("copy", src, dest)

    def copy_all(self, src: PathArg, dest: PathArg) -> Awaitable[None]:
        return self._call("copy_all", src, dest)

    def move(self, src: PathArg, dest: PathArg) -> Awaitable[None]:
        return self._call("move", src, dest)
