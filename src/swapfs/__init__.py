"""swapfs: A filesystem facade with swappable implementations and call logs."""

__version__ = "0.1.0"

from swapfs.exceptions import (
    DuplicateLogError,
    ImplementationAlreadySetError,
    InvalidArgumentError,
    NoSuchMethodError,
    SwapFSError,
    UnknownLogError,
)
from swapfs.facade import SwapFS
from swapfs.local_disk import LocalDiskImpl, LocalSwapFS
from swapfs.logs import LogRegistry
from swapfs.protocol import OPERATIONS, FileSystemImpl, has_operation, supported_operations
from swapfs.types import CallRecord, DirectoryEntry

__all__ = [
    "OPERATIONS",
    "CallRecord",
    "DirectoryEntry",
    "DuplicateLogError",
    "FileSystemImpl",
    "ImplementationAlreadySetError",
    "InvalidArgumentError",
    "LocalDiskImpl",
    "LocalSwapFS",
    "LogRegistry",
    "NoSuchMethodError",
    "SwapFS",
    "SwapFSError",
    "UnknownLogError",
    "__version__",
    "has_operation",
    "supported_operations",
]
