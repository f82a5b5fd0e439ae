"""Configuration management for Bar Logistics."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .share_calculator import DEFAULT_PALETTE


@dataclass
class DataConfig:
    """Data storage configuration."""

    storage_dir: Path


@dataclass
class DefaultsConfig:
    """Default values configuration."""

    unit: str = "un"
    inventory_category: str = "Other"
    event_time: str = "19:00"
    shift_start: str = "18:00"
    shift_end: str = "02:00"


@dataclass
class DashboardConfig:
    """Dashboard window, report and chart configuration."""

    window_days: int = 7
    report_limit: int = 5
    share_category: str = "Distillate"
    palette: list[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))


@dataclass
class AIConfig:
    """Checklist suggestion service configuration."""

    model: str = "gpt-4o-mini"
    base_url: str = ""
    api_key_env: str = "OPENAI_API_KEY"
    temperature: float = 0.4


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Config:
    """Complete application configuration."""

    data: DataConfig
    defaults: DefaultsConfig
    dashboard: DashboardConfig
    ai: AIConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages application configuration from TOML files."""

    def __init__(self, config_path: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional explicit path to config file.
                        If not provided, searches standard locations.
        """
        self.config_path = config_path or self._find_config()
        self._config = self._load_config()

    @property
    def data(self) -> DataConfig:
        """Get data configuration."""
        return self._config.data

    @property
    def defaults(self) -> DefaultsConfig:
        """Get defaults configuration."""
        return self._config.defaults

    @property
    def dashboard(self) -> DashboardConfig:
        """Get dashboard configuration."""
        return self._config.dashboard

    @property
    def ai(self) -> AIConfig:
        """Get suggestion service configuration."""
        return self._config.ai

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return self._config.logging

    def _find_config(self) -> Path:
        """Find config file in standard locations."""
        locations = [
            Path.cwd() / "config.toml",
            Path.home() / ".config" / "bar-logistics" / "config.toml",
            Path.home() / ".bar-logistics" / "config.toml",
        ]

        for loc in locations:
            if loc.exists():
                return loc

        # Return default location if none found
        return Path.home() / ".config" / "bar-logistics" / "config.toml"

    def _load_config(self) -> Config:
        """Load configuration from TOML file."""
        if not self.config_path.exists():
            return self._default_config()

        with open(self.config_path, "rb") as f:
            data = tomllib.load(f)

        defaults = data.get("defaults", {})
        dashboard = data.get("dashboard", {})
        ai = data.get("ai", {})

        return Config(
            data=DataConfig(
                storage_dir=Path(
                    data.get("data", {}).get("storage_dir", "~/bar-logistics/data")
                ).expanduser(),
            ),
            defaults=DefaultsConfig(
                unit=defaults.get("unit", "un"),
                inventory_category=defaults.get("inventory_category", "Other"),
                event_time=defaults.get("event_time", "19:00"),
                shift_start=defaults.get("shift_start", "18:00"),
                shift_end=defaults.get("shift_end", "02:00"),
            ),
            dashboard=DashboardConfig(
                window_days=dashboard.get("window_days", 7),
                report_limit=dashboard.get("report_limit", 5),
                share_category=dashboard.get("share_category", "Distillate"),
                palette=dashboard.get("palette", list(DEFAULT_PALETTE)),
            ),
            ai=AIConfig(
                model=ai.get("model", "gpt-4o-mini"),
                base_url=ai.get("base_url", ""),
                api_key_env=ai.get("api_key_env", "OPENAI_API_KEY"),
                temperature=ai.get("temperature", 0.4),
            ),
            logging=LoggingConfig(level=data.get("logging", {}).get("level", "WARNING")),
        )

    def _default_config(self) -> Config:
        """Return default configuration."""
        return Config(
            data=DataConfig(storage_dir=Path.home() / "bar-logistics" / "data"),
            defaults=DefaultsConfig(),
            dashboard=DashboardConfig(),
            ai=AIConfig(),
            logging=LoggingConfig(),
        )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get config value by dot-notation path.

        Args:
            key_path: Dot-separated path like 'dashboard.window_days'
            default: Default value if path not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split(".")
        value: Any = self._config

        for key in keys:
            if hasattr(value, key):
                value = getattr(value, key)
            elif isinstance(value, dict):
                value = value.get(key)
                if value is None:
                    return default
            else:
                return default

        return value if value is not None else default
