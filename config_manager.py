"""
Configuration management for the GitHub Trending widget.
Handles loading, validating, and providing access to application settings.
"""

import copy
import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool


@dataclass
class SourceConfig:
    """Outbound source page settings."""
    url: str
    base_url: str
    timeout: float
    user_agent: str


@dataclass
class WidgetConfig:
    """Widget response settings."""
    include_styles: bool
    disable_caching: bool


def _as_flag(value: Any) -> bool:
    """Interpret a boolean setting given as a JSON bool or a string."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "widget_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        # Start with default config
        self._config = self._get_default_config()

        # Load base config from file
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        # Override with environment variables
        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 8081,
                "debug": False,
            },
            "source": {
                "url": "https://github.com/trending",
                "base_url": "https://github.com",
                "timeout": 10.0,
                "user_agent": DEFAULT_USER_AGENT,
            },
            "widget": {
                "include_styles": True,
                "disable_caching": True,
            },
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = _as_flag(os.getenv("APP_DEBUG"))

        # Source settings
        if os.getenv("TRENDING_SOURCE_URL"):
            self._config["source"]["url"] = os.getenv("TRENDING_SOURCE_URL")

        if os.getenv("TRENDING_BASE_URL"):
            self._config["source"]["base_url"] = os.getenv("TRENDING_BASE_URL")

        if os.getenv("TRENDING_TIMEOUT"):
            self._config["source"]["timeout"] = float(os.getenv("TRENDING_TIMEOUT"))

        if os.getenv("TRENDING_USER_AGENT"):
            self._config["source"]["user_agent"] = os.getenv("TRENDING_USER_AGENT")

        # Widget settings
        if os.getenv("WIDGET_INCLUDE_STYLES"):
            self._config["widget"]["include_styles"] = _as_flag(os.getenv("WIDGET_INCLUDE_STYLES"))

        if os.getenv("WIDGET_DISABLE_CACHING"):
            self._config["widget"]["disable_caching"] = _as_flag(os.getenv("WIDGET_DISABLE_CACHING"))

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=int(app_config["port"]),
            debug=_as_flag(app_config["debug"]),
        )

    def get_source_config(self) -> SourceConfig:
        """Get source page configuration."""
        source_config = self._config["source"]
        return SourceConfig(
            url=source_config["url"],
            base_url=source_config["base_url"].rstrip("/"),
            timeout=float(source_config["timeout"]),
            user_agent=source_config["user_agent"],
        )

    def get_widget_config(self) -> WidgetConfig:
        """Get widget response configuration."""
        widget_config = self._config["widget"]
        return WidgetConfig(
            include_styles=_as_flag(widget_config["include_styles"]),
            disable_caching=_as_flag(widget_config["disable_caching"]),
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return copy.deepcopy(self._config)

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()


# Global configuration instance
config_manager = ConfigManager()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def get_source_config() -> SourceConfig:
    """Get source page configuration."""
    return config_manager.get_source_config()


def get_widget_config() -> WidgetConfig:
    """Get widget response configuration."""
    return config_manager.get_widget_config()


def reload_config() -> None:
    """Reload configuration."""
    config_manager.reload()
