"""
Path Resolver Module

Builds and normalizes the composite keys used by the file table.
Equivalent spellings of a directory (``/docs/``, ``//docs``,
``/tmp/../docs``, ``\\docs``) always produce the same key.

Author: versionfs contributors
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List


SEPARATOR = '/'


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    is_absolute: bool
    components: List[str]

    def __str__(self) -> str:
        if self.is_absolute:
            return SEPARATOR + SEPARATOR.join(self.components)
        return SEPARATOR.join(self.components) if self.components else '.'


class PathResolver:
    """
    Resolves and manipulates table paths.

    Paths are labels only: nothing here checks that a directory exists.
    Absolute and relative paths are never merged, so ``docs`` and
    ``/docs`` are different directories.
    """

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        Backslashes are treated as separators; empty and ``.``
        components are dropped.
        """
        path = path.replace('\\', SEPARATOR)
        is_absolute = path.startswith(SEPARATOR)
        components = [c for c in path.split(SEPARATOR) if c and c != '.']
        return ParsedPath(is_absolute=is_absolute, components=components)

    @staticmethod
    def normalize(path: str) -> str:
        """
        Normalize a path by resolving . and ..

        ``..`` at the root of an absolute path is discarded; at the start
        of a relative path it is kept.

        Args:
            path: Path to normalize

        Returns:
            Normalized path string
        """
        parsed = PathResolver.parse(path)

        result: List[str] = []

        for component in parsed.components:
            if component == '..':
                if result and result[-1] != '..':
                    result.pop()
                elif not parsed.is_absolute:
                    result.append(component)
            else:
                result.append(component)

        return str(ParsedPath(is_absolute=parsed.is_absolute, components=result))

    @staticmethod
    def join(*paths: str) -> str:
        """
        Join path components and normalize the result.

        A component starting with a separator restarts the path.
        """
        if not paths:
            return '.'

        result = paths[0]

        for path in paths[1:]:
            if not result or PathResolver.is_absolute(path):
                result = path
            else:
                result = result.rstrip('/\\') + SEPARATOR + path

        return PathResolver.normalize(result)

    @staticmethod
    def validate_name(name: str) -> str:
        """
        Check that ``name`` is a single path component.

        Raises:
            TypeError: If name is not a string
            ValueError: If name is empty, ``.``/``..``, or contains a separator
        """
        if not isinstance(name, str):
            raise TypeError(f"File name must be a string, got {type(name).__name__}")
        if not name or name in ('.', '..'):
            raise ValueError(f"Invalid file name: {name!r}")
        if SEPARATOR in name or '\\' in name:
            raise ValueError(f"File name must not contain a separator: {name!r}")
        return name

    @staticmethod
    def key(path: str, name: str) -> str:
        """
        Build the composite table key for a file.

        Args:
            path: Directory label
            name: File name (a single component)

        Returns:
            Normalized ``path/name`` string
        """
        PathResolver.validate_name(name)
        return PathResolver.normalize(PathResolver.join(path, name))

    @staticmethod
    def is_absolute(path: str) -> bool:
        return path.replace('\\', SEPARATOR).startswith(SEPARATOR)
