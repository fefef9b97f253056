"""
versionfs Exception Hierarchy

Architecture:
    FileTableException (Base)
    ├── AlreadyExistsError   (ErrorKind.ALREADY_EXISTS)
    ├── NotFoundError        (ErrorKind.NOT_FOUND)
    └── InvalidVersionError  (ErrorKind.INVALID_VERSION)
    ConfigError
"""

from .fs_exceptions import (
    ErrorKind,
    FileTableException,
    AlreadyExistsError,
    NotFoundError,
    InvalidVersionError,
)

from .config_exceptions import ConfigError

__all__ = [
    "ErrorKind",
    "FileTableException",
    "AlreadyExistsError",
    "NotFoundError",
    "InvalidVersionError",
    "ConfigError",
]
