"""Custom exceptions for the pool parser."""


class PoolParserError(Exception):
    """Base exception class for pool parser errors.

    Attributes:
        code (str): Error code for identifying the error type
        message (str): Descriptive error message
        details (dict): Additional error context and details
    """

    def __init__(self, message: str, code: str = "POOL_ERR", details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        error_msg = f"[{self.code}] {self.message}"
        if self.details:
            error_msg += f"\nDetails: {self.details}"
        return error_msg


class TransientError(PoolParserError):
    """Raised when a remote call fails with a bad status or a transport error.

    The fetcher retries these before handing the last one to the caller.
    """

    def __init__(self, uri: str, status_code: int | None = None, details: dict | None = None):
        self.uri = uri
        self.status_code = status_code
        if status_code is not None:
            message = f"An error with code {status_code} was thrown trying to get a response from: {uri}"
        else:
            message = f"Failed to get a response from: {uri}"
        super().__init__(message, code="TRANSIENT", details=details)


class NotFoundError(PoolParserError):
    """Raised when the cache and every remote lookup strategy came up empty."""

    def __init__(self, identity: str, details: dict | None = None):
        self.identity = identity
        message = f"Could not find {identity} in the database or from the remote source"
        super().__init__(message, code="NOT_FOUND", details=details)


class RosterError(PoolParserError):
    """Raised when a roster row can't be turned into a pool."""

    def __init__(self, row_number: int, reason: str, details: dict | None = None):
        self.row_number = row_number
        message = f"Invalid roster row {row_number}: {reason}"
        super().__init__(message, code="ROSTER", details=details)
