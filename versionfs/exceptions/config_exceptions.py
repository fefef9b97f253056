"""
Configuration Exceptions

Author: versionfs contributors
Version: 1.0.0
"""

from typing import Optional, Any


class ConfigError(Exception):
    """
    Configuration could not be loaded or is invalid.

    Attributes:
        message: Human-readable error description
        source: Path of the configuration file (if applicable)
        error_code: Numeric error code
        context: Additional structured context
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.error_code = 6000
        self.context = context or {}
        if source:
            self.context["source"] = source

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.source:
            base = f"{base} (source={self.source})"
        return base
