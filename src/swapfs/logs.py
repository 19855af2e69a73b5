"""LogRegistry — named call logs fed by the facade."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .exceptions import DuplicateLogError, InvalidArgumentError, UnknownLogError
from .types import CallRecord

if TYPE_CHECKING:
    from collections.abc import Iterable


class LogRegistry:
    """Independently growing call logs, keyed by caller-chosen names.

    Every call recorded while a log is open is appended to it; several
    logs may be open at once and each receives every call.  Ending a log
    removes it and hands its records to the caller.
    """

    def __init__(self) -> None:
        self._logs: dict[str, list[CallRecord]] = {}

    def start(self, name: str) -> None:
        """Open an empty log called *name*."""
        if not name or not isinstance(name, str):
            raise InvalidArgumentError("Log name must be a non-empty string.")
        if name in self._logs:
            raise DuplicateLogError(f'Log "{name}" already exists.')
        self._logs[name] = []

    def end(self, name: str) -> list[CallRecord]:
        """Close the log called *name* and return its records in call order."""
        try:
            return self._logs.pop(name)
        except (KeyError, TypeError):
            raise UnknownLogError(f'Log "{name}" does not exist.') from None

    def record(self, method_name: str, args: Iterable[Any] = ()) -> None:
        """Append a call to every open log."""
        if not self._logs:
            return
        entry = CallRecord(method_name, tuple(args))
        for entries in self._logs.values():
            entries.append(entry)

    @property
    def names(self) -> list[str]:
        """Names of the open logs, in the order they were started."""
        return list(self._logs)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._logs

    def __len__(self) -> int:
        return len(self._logs)
