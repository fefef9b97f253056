"""
Operation Results

Every file table operation returns an OperationResult instead of raising
for expected failures. The result carries the ErrorKind tag and the
underlying exception, so callers can branch on ``result.kind`` or
re-raise with ``result.raise_for_error()``.

Author: versionfs contributors
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Optional

from versionfs.exceptions import ErrorKind, FileTableException


@dataclass(frozen=True)
class VersionReport:
    """Read-only description produced by switch_version."""
    name: str
    path: str
    version: int
    current_version: int
    contents: str

    def render(self) -> str:
        return f"Old version of {self.name} (Version {self.version}):\n{self.contents}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a single file table operation."""
    success: bool
    operation: str
    key: str
    kind: Optional[ErrorKind] = None
    error: Optional[FileTableException] = None
    report: Optional[VersionReport] = None

    @classmethod
    def ok(
        cls,
        operation: str,
        key: str,
        report: Optional[VersionReport] = None
    ) -> 'OperationResult':
        return cls(success=True, operation=operation, key=key, report=report)

    @classmethod
    def failure(
        cls,
        operation: str,
        key: str,
        error: FileTableException
    ) -> 'OperationResult':
        return cls(
            success=False,
            operation=operation,
            key=key,
            kind=error.kind,
            error=error,
        )

    def __bool__(self) -> bool:
        return self.success

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        if self.report is not None:
            return self.report.render()
        return f"{self.operation}: {self.key}"

    def raise_for_error(self) -> 'OperationResult':
        """Raise the carried exception if the operation failed."""
        if self.error is not None:
            raise self.error
        return self
