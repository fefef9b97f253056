"""
versionfs Core Module

Configuration loading for the outer layers.
"""

from .config_loader import (
    ConfigLoader,
    Config,
    AppConfig,
    LoggingConfig,
    ShellConfig,
    load_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'AppConfig',
    'LoggingConfig',
    'ShellConfig',
    'load_config',
]
