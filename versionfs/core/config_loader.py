"""
versionfs Configuration Loader

Loads settings for the outer layers (logging, shell, demo banner) from a
JSON file. The file table itself takes no configuration.

Author: versionfs contributors
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from versionfs.exceptions import ConfigError
from versionfs.logger import LogLevel, get_logger


@dataclass
class AppConfig:
    """Application identification settings."""
    name: str = "versionfs"
    version: str = "1.0.0"
    banner: str = "versionfs - in-memory versioned file table"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True

    @property
    def level_value(self) -> LogLevel:
        return LogLevel.from_name(self.level)


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    prompt: str = "vfs> "
    history_size: int = 1000


@dataclass
class Config:
    """Main configuration container."""
    app: AppConfig = field(default_factory=AppConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)


class ConfigLoader:
    """
    Configuration loader.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('versionfs.json')
        >>> config.shell.prompt
        'vfs> '
    """

    def __init__(self):
        self._config = Config()
        self._source: Optional[str] = None
        self._logger = get_logger('config')

    @property
    def config(self) -> Config:
        return self._config

    @property
    def source(self) -> Optional[str]:
        return self._source

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigError: If the file cannot be read, parsed or validated
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigError("Configuration file not found", source=config_path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file: {e}", source=config_path)
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file: {e}", source=config_path)

        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be an object", source=config_path)

        self._config = self._parse_config(data, config_path)
        self._source = config_path
        self._logger.info("Configuration loaded", context={'source': config_path})
        return self._config

    def _parse_config(self, data: dict[str, Any], source: str) -> Config:
        """Parse configuration data into a Config object."""
        config = Config()

        config.app = self._parse_section(data, 'app', AppConfig, source)
        config.logging = self._parse_section(data, 'logging', LoggingConfig, source)
        config.shell = self._parse_section(data, 'shell', ShellConfig, source)

        self._validate(config, source)
        return config

    @staticmethod
    def _parse_section(data: dict[str, Any], name: str, section_cls: type, source: str) -> Any:
        section_data = data.get(name, {})
        if not isinstance(section_data, dict):
            raise ConfigError(f"Section '{name}' must be an object", source=source)

        defaults = section_cls()
        known = {f.name for f in fields(section_cls)}
        unknown = set(section_data) - known
        if unknown:
            raise ConfigError(
                f"Unknown keys in section '{name}': {', '.join(sorted(unknown))}",
                source=source
            )

        return section_cls(**{
            key: section_data.get(key, getattr(defaults, key))
            for key in known
        })

    @staticmethod
    def _validate(config: Config, source: Optional[str] = None) -> None:
        if not isinstance(config.logging.level, str):
            raise ConfigError("logging.level must be a level name", source=source)
        try:
            config.logging.level_value
        except ValueError as e:
            raise ConfigError(str(e), source=source)

        if not isinstance(config.shell.history_size, int) or config.shell.history_size < 0:
            raise ConfigError("shell.history_size must be a non-negative integer", source=source)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'shell.prompt')
            default: Default value if key not found
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Raises:
            ConfigError: If the key does not name an existing setting or
                the new value fails validation
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if not hasattr(obj, final_key):
            raise ConfigError(f"Invalid configuration key: {key}")

        previous = getattr(obj, final_key)
        setattr(obj, final_key, value)
        try:
            self._validate(self._config)
        except ConfigError:
            setattr(obj, final_key, previous)
            raise

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            return obj

        return dataclass_to_dict(self._config)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Build a Config from ``config_path``, or defaults when it is None.
    """
    loader = ConfigLoader()
    if config_path is None:
        return loader.config
    return loader.load(config_path)
