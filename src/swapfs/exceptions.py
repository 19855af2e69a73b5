"""Custom exception hierarchy for the swapfs facade."""


class SwapFSError(Exception):
    """Base exception for all swapfs errors."""


class InvalidArgumentError(SwapFSError, TypeError):
    """Raised when a control call receives a malformed argument."""


class DuplicateLogError(SwapFSError):
    """Raised when starting a log whose name is already open."""


class UnknownLogError(SwapFSError):
    """Raised when ending a log that was never started."""


class ImplementationAlreadySetError(SwapFSError):
    """Raised when swapping implementations while a swap is already in effect."""

    def __init__(self) -> None:
        super().__init__("Implementation already set.")


class NoSuchMethodError(SwapFSError):
    """Raised when the active implementation lacks the requested operation."""

    def __init__(self, method_name: str) -> None:
        super().__init__(f'Method "{method_name}" does not exist on impl.')
        self.method_name = method_name
