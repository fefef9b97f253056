"""
versionfs - an in-memory hierarchical file table

Files are addressed by directory path plus name and support create,
delete, copy, move and a simple linear versioning scheme. Implemented
in Python 3.10+ using only the standard library.
"""

__version__ = "1.0.0"

from .filesystem import FileTable, FileRecord, OperationResult, VersionReport, PathResolver
from .exceptions import (
    ErrorKind,
    FileTableException,
    AlreadyExistsError,
    NotFoundError,
    InvalidVersionError,
)

__all__ = [
    'FileTable',
    'FileRecord',
    'OperationResult',
    'VersionReport',
    'PathResolver',
    'ErrorKind',
    'FileTableException',
    'AlreadyExistsError',
    'NotFoundError',
    'InvalidVersionError',
]
