"""Configuration management for taskline."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


logger = logging.getLogger(__name__)

DATA_DIR_ENV = "TASKLINE_DATA_DIR"


@dataclass
class ConfigModel:
    """Global configuration model for taskline."""

    # File paths
    data_dir: str = "~/.taskline"
    data_file: str = "tasks.txt"

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    # UI
    no_color: bool = False
    greeting: bool = True

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(self.data_dir)
        if self.log_file:
            self.log_file = os.path.expanduser(self.log_file)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "data_file": self.data_file,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "no_color": self.no_color,
            "greeting": self.greeting,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        return cls(**{k: v for k, v in data.items() if k in known})

    def get_data_path(self) -> Path:
        """Get the save-file path."""
        return Path(self.data_dir) / self.data_file

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"

    def get_backup_path(self, timestamp: Optional[str] = None) -> Path:
        """Get backup directory path."""
        if timestamp:
            return Path(self.data_dir) / "backups" / timestamp
        return Path(self.data_dir) / "backups"


class Config:
    """Configuration manager for taskline."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or create default."""
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()
        env_dir = os.environ.get(DATA_DIR_ENV)
        if env_dir:
            config = ConfigModel(data_dir=env_dir)

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.info("Loaded configuration from %s", config_path)
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning("Failed to load config from %s: %s. Using default configuration.",
                               config_path, e)
        else:
            cls.save(config, config_path)
            logger.info("Created default configuration at %s", config_path)

        if env_dir:
            config.data_dir = os.path.expanduser(env_dir)

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(config.to_yaml())
            logger.debug("Configuration saved to %s", config_path)
        except OSError as e:
            logger.error("Failed to save config to %s: %s", config_path, e)

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def reset_config() -> None:
    """Forget the cached configuration (useful for testing)."""
    Config._instance = None
