"""
Configuration for localrepo - repository location, display and logging
settings, read from a TOML file.
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LOCALREPO_CONFIG"
DEFAULT_REPOSITORY = str(Path("~") / ".m2" / "repository")


def _section(data: dict, name: str) -> dict:
    """Return table `name` from the config data; anything else counts as missing."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring config section %r: expected a table, got %s",
                       name, type(section).__name__)
        return {}
    return section


def default_config_path() -> Path:
    """Return the config file path, respecting the LOCALREPO_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".localrepo" / "config.toml"


@dataclass
class RepositoryConfig:
    """Where the local repository lives."""
    path: str = DEFAULT_REPOSITORY


@dataclass
class DisplayConfig:
    """Listing output settings."""
    color_output: bool = True
    date_format: str = "%c"  # locale date and time


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class GlobalConfig:
    """Global localrepo configuration."""
    repository: RepositoryConfig = field(default_factory=RepositoryConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def repository_path(self) -> Path:
        """The repository root with ``~`` expanded."""
        return Path(self.repository.path).expanduser()

    @property
    def log_level(self) -> int:
        level = logging.getLevelName(str(self.log.level).upper())
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'GlobalConfig':
        """Load configuration from file, falling back to defaults."""
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            # Return default configuration if file doesn't exist
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = toml.load(f)
        except (OSError, toml.TomlDecodeError) as e:
            logger.warning("Could not load config from %s: %s", config_path, e)
            return cls()
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> 'GlobalConfig':
        """Create GlobalConfig from dictionary data."""
        repo_data = _section(data, 'repository')
        repository = RepositoryConfig(
            path=repo_data.get('path', DEFAULT_REPOSITORY),
        )

        display_data = _section(data, 'display')
        display = DisplayConfig(
            color_output=display_data.get('color_output', True),
            date_format=display_data.get('date_format', "%c"),
        )

        logging_data = _section(data, 'logging')
        logging_config = LoggingConfig(
            level=logging_data.get('level', "WARNING"),
        )

        return cls(repository=repository, display=display, log=logging_config)

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            'repository': {
                'path': self.repository.path,
            },
            'display': {
                'color_output': self.display.color_output,
                'date_format': self.display.date_format,
            },
            'logging': {
                'level': self.log.level,
            },
        }
        with open(config_path, 'w', encoding='utf-8') as f:
            toml.dump(data, f)
