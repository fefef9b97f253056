"""
versionfs File Table Module

Provides the in-memory file table:
- Composite path/name keys with normalization
- File records with a linear version counter
- Create, delete, copy, move, save and switch operations
- Tagged operation results
"""

from .path_resolver import PathResolver
from .record import FileRecord, INITIAL_VERSION
from .results import OperationResult, VersionReport
from .file_table import FileTable, table_operation

__all__ = [
    # Path Resolver
    'PathResolver',
    # Record
    'FileRecord',
    'INITIAL_VERSION',
    # Results
    'OperationResult',
    'VersionReport',
    # Table
    'FileTable',
    'table_operation',
]
