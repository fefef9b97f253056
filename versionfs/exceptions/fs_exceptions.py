"""
File Table Exceptions

Exceptions raised by the file table when an operation cannot be applied.
Every exception carries an ErrorKind so callers can branch on the kind of
failure without inspecting message strings.

Author: versionfs contributors
Version: 1.0.0
"""

from enum import Enum
from typing import Optional, Any


class ErrorKind(Enum):
    """Recoverable failure kinds reported by file table operations."""
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    INVALID_VERSION = "invalid_version"


class FileTableException(Exception):
    """
    Base exception for all file table errors.

    Attributes:
        message: Human-readable error description
        key: Composite table key associated with the error (if applicable)
        kind: ErrorKind tag for programmatic handling
        error_code: Numeric error code
        context: Additional structured context
    """

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.error_code = error_code or 5000
        self.context = context or {}
        if key:
            self.context["key"] = key

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.key:
            base = f"{base} (key={self.key})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"key={self.key!r}, "
            f"error_code={self.error_code})"
        )


class AlreadyExistsError(FileTableException):
    """
    The target key is already occupied.

    Raised by create, and by copy and move when the destination
    already holds a record.

    Example:
        >>> raise AlreadyExistsError("/documents/example.txt")
    """

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(
        self,
        key: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File already exists: {key}",
            key=key,
            error_code=5001,
            context=context
        )


class NotFoundError(FileTableException):
    """
    The source key is absent from the table.

    Example:
        >>> raise NotFoundError("/documents/missing.txt")
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        key: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File does not exist: {key}",
            key=key,
            error_code=5002,
            context=context
        )


class InvalidVersionError(FileTableException):
    """
    The requested version is not in 1..current.

    Example:
        >>> raise InvalidVersionError("/documents/a.txt", requested=3, current=2)
    """

    kind = ErrorKind.INVALID_VERSION

    def __init__(
        self,
        key: str,
        requested: int,
        current: int,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["requested"] = requested
        ctx["current"] = current
        super().__init__(
            message=f"Invalid version number: {requested} (current is {current})",
            key=key,
            error_code=5003,
            context=ctx
        )
        self.requested = requested
        self.current = current
