"""
File Record Module

The unit stored in the file table: one logical file with its latest
contents and a linear version counter.

Author: versionfs contributors
Version: 1.0.0
"""

from dataclasses import dataclass, replace
from typing import Optional, Any

from .path_resolver import PathResolver


INITIAL_VERSION = 1


@dataclass
class FileRecord:
    """
    A file in the table.

    Only the latest contents are kept; ``version`` counts how many
    times the contents have been saved since creation.
    """

    name: str
    path: str
    contents: str = ""
    version: int = INITIAL_VERSION

    @property
    def key(self) -> str:
        return PathResolver.key(self.path, self.name)

    @property
    def size(self) -> int:
        return len(self.contents)

    def copy(self, path: Optional[str] = None) -> 'FileRecord':
        """
        Return an independent record, optionally placed in ``path``.

        Fields are immutable strings and ints, so a shallow replace
        shares no mutable state with the original.
        """
        if path is None:
            return replace(self)
        return replace(self, path=PathResolver.normalize(path))

    def save(self, contents: str) -> int:
        """Replace the contents and bump the version. Returns the new version."""
        self.contents = contents
        self.version += 1
        return self.version

    def has_version(self, version: int) -> bool:
        return INITIAL_VERSION <= version <= self.version

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'path': self.path,
            'key': self.key,
            'version': self.version,
            'size': self.size,
        }
