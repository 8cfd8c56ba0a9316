"""
Configuration management for the Policy Platform.

This module handles loading and validation of configuration settings
from YAML files and environment variables.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class SourceConfig(BaseModel):
    """Configuration for the document source."""
    path: Optional[str] = Field(default=None, description="Local JSON or YAML document")
    url: Optional[str] = Field(default=None, description="Remote JSON document")
    timeout: float = Field(default=30.0, gt=0)


class ExportConfig(BaseModel):
    """Configuration for document export."""
    output_directory: str = Field(default="exports")
    markdown_filename: str = Field(default="platform.md")
    html_filename: str = Field(default="platform.html")


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO")
    file: Optional[str] = Field(default=None)
    format: str = Field(default="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}")
    rotation: str = Field(default="10 MB")
    retention: str = Field(default="1 month")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        allowed = ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']
        level = v.upper()
        if level not in allowed:
            raise ValueError(f'Log level must be one of {allowed}')
        return level


class UIConfig(BaseModel):
    """Configuration for the web interface."""
    title: str = Field(default="Policy Platform")
    host: str = Field(default="localhost")
    port: int = Field(default=8501, gt=0, lt=65536)
    dark_mode: bool = Field(default=False, description="Initial theme for a new session")
    base_url: str = Field(default="http://localhost:8501/", description="Page URL used for shareable section links")


class Config(BaseModel):
    """Main configuration class."""
    source: SourceConfig = SourceConfig()
    export: ExportConfig = ExportConfig()
    logging: LoggingConfig = LoggingConfig()
    ui: UIConfig = UIConfig()


class ConfigManager:
    """Manages configuration loading and access."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = config_path or self._find_config_file()
        self._config: Optional[Config] = None

    def _find_config_file(self) -> Optional[str]:
        """Find the configuration file in standard locations."""
        possible_paths = [
            os.getenv("POLICY_PLATFORM_CONFIG"),
            "config/config.yaml",
            "config.yaml",
            os.path.expanduser("~/.policy_platform/config.yaml"),
        ]

        for path in possible_paths:
            if path and os.path.exists(path):
                return path

        # No file: defaults plus environment overrides
        return None

    def load_config(self) -> Config:
        """
        Load configuration from file and environment variables.

        Returns:
            Config: Loaded configuration object
        """
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_path:
            with open(self.config_path, 'r', encoding='utf-8') as file:
                config_data = yaml.safe_load(file) or {}

        # Override with environment variables
        config_data = self._apply_env_overrides(config_data)

        # Validate and create config object
        self._config = Config(**config_data)

        return self._config

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to config data."""
        env_mappings = {
            'POLICY_SOURCE_PATH': ['source', 'path'],
            'POLICY_SOURCE_URL': ['source', 'url'],
            'EXPORT_DIR': ['export', 'output_directory'],
            'LOG_LEVEL': ['logging', 'level'],
            'LOG_FILE': ['logging', 'file'],
            'UI_DARK_MODE': ['ui', 'dark_mode'],
            'UI_BASE_URL': ['ui', 'base_url'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                # Navigate to the nested config location
                current = config_data
                for key in config_path[:-1]:
                    if not isinstance(current.get(key), dict):
                        current[key] = {}
                    current = current[key]

                # Set the value (convert boolean strings)
                if env_value.lower() in ('true', 'false'):
                    current[config_path[-1]] = env_value.lower() == 'true'
                else:
                    current[config_path[-1]] = env_value

        return config_data

    @property
    def config(self) -> Config:
        """Get the loaded configuration."""
        if self._config is None:
            return self.load_config()
        return self._config

    def reload_config(self) -> Config:
        """Reload configuration from file."""
        self._config = None
        return self.load_config()


# Global config manager instance
config_manager = ConfigManager()


def get_config() -> Config:
    """Get the global configuration instance."""
    return config_manager.config


def reload_config() -> Config:
    """Reload the global configuration."""
    return config_manager.reload_config()
