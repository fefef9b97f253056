"""
File Table Module

The in-memory file table: a mapping from normalized ``path/name`` keys to
FileRecord objects, with create, delete, copy, move and a linear
versioning scheme.

Author: versionfs contributors
Version: 1.0.0
"""

from functools import wraps
from typing import Optional, Any, Callable, List

from .path_resolver import PathResolver
from .record import FileRecord, INITIAL_VERSION
from .results import OperationResult, VersionReport
from versionfs.exceptions import (
    FileTableException,
    AlreadyExistsError,
    NotFoundError,
    InvalidVersionError,
)


def table_operation(name: str) -> Callable:
    """
    Turn expected FileTableException failures into OperationResult values.

    Anything else (ValueError from a malformed name, TypeError, ...)
    propagates unchanged.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self: 'FileTable', *args, **kwargs) -> OperationResult:
            try:
                return func(self, *args, **kwargs)
            except FileTableException as e:
                return OperationResult.failure(name, e.key or '', e)
        return wrapper
    return decorator


class FileTable:
    """
    In-memory file table.

    Each table owns its records exclusively; tables never share state,
    so several can coexist in one process. Access is assumed to be
    single-threaded.

    Names must be a single path component. Unlike a plain path join,
    an empty name, ``.``, ``..`` or a name containing a separator
    raises ValueError instead of silently addressing another directory.

    Example:
        >>> table = FileTable()
        >>> table.create('example.txt', '/documents', 'This is a sample file.')
        >>> table.save_version('example.txt', '/documents', 'Updated.')
        >>> print(table.switch_version('example.txt', '/documents', 1).report)
    """

    def __init__(self):
        self._records: dict[str, FileRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and PathResolver.normalize(key) in self._records

    def _require(self, name: str, path: str) -> tuple[str, FileRecord]:
        key = PathResolver.key(path, name)
        record = self._records.get(key)
        if record is None:
            raise NotFoundError(key)
        return key, record

    def _require_free(self, name: str, path: str) -> str:
        key = PathResolver.key(path, name)
        if key in self._records:
            raise AlreadyExistsError(key)
        return key

    @table_operation('create')
    def create(self, name: str, path: str, contents: str) -> OperationResult:
        """
        Create a new file with version 1.

        Fails with ALREADY_EXISTS if the key is taken; the existing
        record is left untouched.
        """
        key = self._require_free(name, path)

        self._records[key] = FileRecord(
            name=name,
            path=PathResolver.normalize(path),
            contents=contents,
            version=INITIAL_VERSION,
        )

        return OperationResult.ok('create', key)

    @table_operation('delete')
    def delete(self, name: str, path: str) -> OperationResult:
        """Remove a file. Fails with NOT_FOUND if absent."""
        key, _ = self._require(name, path)

        del self._records[key]

        return OperationResult.ok('delete', key)

    @table_operation('copy')
    def copy(self, name: str, src_path: str, dest_path: str) -> OperationResult:
        """
        Copy a file into another directory.

        The copy keeps name, contents and version but is an independent
        record: saving either one never affects the other. Copying onto
        the source directory fails with ALREADY_EXISTS.
        """
        _, record = self._require(name, src_path)
        dest_key = self._require_free(name, dest_path)

        self._records[dest_key] = record.copy(path=dest_path)

        return OperationResult.ok('copy', dest_key)

    @table_operation('move')
    def move(self, name: str, src_path: str, dest_path: str) -> OperationResult:
        """
        Relocate a file into another directory.

        The same record object is re-keyed and its path updated; no
        duplicate exists at any point.
        """
        src_key, record = self._require(name, src_path)
        dest_key = self._require_free(name, dest_path)

        record.path = PathResolver.normalize(dest_path)
        self._records[dest_key] = self._records.pop(src_key)

        return OperationResult.ok('move', dest_key)

    @table_operation('save_version')
    def save_version(self, name: str, path: str, contents: str) -> OperationResult:
        """
        Store new contents and increment the version.

        The previous contents are discarded.
        """
        key, record = self._require(name, path)

        record.save(contents)

        return OperationResult.ok('save_version', key)

    @table_operation('switch_version')
    def switch_version(self, name: str, path: str, version: int) -> OperationResult:
        """
        Report on a previous version of a file.

        Only the latest contents are stored, so the report always shows
        the current contents, whichever valid version was requested.
        Nothing is mutated.

        Raises:
            TypeError: If version is not an int
        """
        if isinstance(version, bool) or not isinstance(version, int):
            raise TypeError(f"Version must be an int, got {type(version).__name__}")

        key, record = self._require(name, path)

        if not record.has_version(version):
            raise InvalidVersionError(key, requested=version, current=record.version)

        report = VersionReport(
            name=record.name,
            path=record.path,
            version=version,
            current_version=record.version,
            contents=record.contents,
        )
        return OperationResult.ok('switch_version', key, report=report)

    def stat(self, name: str, path: str) -> Optional[FileRecord]:
        """Return a snapshot of a record, or None if absent."""
        record = self._records.get(PathResolver.key(path, name))
        if record is None:
            return None
        return record.copy()

    def exists(self, name: str, path: str) -> bool:
        return PathResolver.key(path, name) in self._records

    def list_records(self, path: Optional[str] = None) -> List[FileRecord]:
        """
        List record snapshots sorted by key.

        Args:
            path: Restrict to records whose directory normalizes to this path
        """
        directory = PathResolver.normalize(path) if path is not None else None
        return [
            record.copy()
            for key, record in sorted(self._records.items())
            if directory is None or record.path == directory
        ]

    def get_stats(self) -> dict[str, Any]:
        """Get table statistics."""
        records = self._records.values()
        return {
            'total_files': len(self._records),
            'directories': len({r.path for r in records}),
            'total_size': sum(r.size for r in records),
            'max_version': max((r.version for r in records), default=0),
        }
