"""Errors raised by fieldvisit."""


class InvalidStateError(RuntimeError):
    """Raised when an operation is invoked on a record that misses a prerequisite value."""

    def __init__(self, missing, operation=None):
        self.missing = missing
        self.operation = operation
        msg = f"{missing} must be set"
        if operation:
            msg += f" before {operation}"
        super().__init__(msg)
