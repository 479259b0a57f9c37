"""
Configuration management for the assessment dashboard.

Loads and validates configuration from config.yaml (or environment variables as override).
"""
from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from physio_dashboard.common.constants import (
    CHART_HEIGHT,
    CHART_MARGIN,
    CHART_WIDTH,
)

log = logging.getLogger(__name__)

# Load .env file if it exists (for local development)
load_dotenv()

VALID_LAYOUTS = {"wide", "centered"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Default configuration
DEFAULT_CONFIG = {
    'profile': {
        'display_name': 'Anna Mendes',
    },
    'page': {
        'title': 'Dashboard de Avaliação Física',
        'icon': '🏋️',
        'layout': 'wide',
    },
    'chart': {
        'width': CHART_WIDTH,
        'height': CHART_HEIGHT,
        'margin': dict(CHART_MARGIN),
        'fit_container': False,
    },
    'logging': {
        'level': 'INFO',
    },
}


@dataclass(frozen=True)
class ChartSettings:
    """Geometry of the history chart."""
    width: int = CHART_WIDTH
    height: int = CHART_HEIGHT
    margin_top: int = CHART_MARGIN["top"]
    margin_right: int = CHART_MARGIN["right"]
    margin_bottom: int = CHART_MARGIN["bottom"]
    margin_left: int = CHART_MARGIN["left"]
    fit_container: bool = False


def _parse_bool(text: str) -> bool:
    return text.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """
    Configuration singleton for the dashboard.

    Loads configuration from:
    1. config.yaml in the working directory (if exists)
    2. Environment variables (as override)
    3. Defaults (as fallback)

    Example:
        >>> config = Config()
        >>> config.get_display_name()
        'Anna Mendes'
        >>> config.get_chart_settings().width
        600
    """

    _instance: Optional['Config'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    @classmethod
    def reload(cls) -> 'Config':
        """Drop the cached instance and load configuration again."""
        cls._instance = None
        return cls()

    def _load_config(self) -> None:
        """Load configuration from config.yaml and environment."""
        # Start with defaults
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        config_path = Path(os.getenv('PHYSIO_CONFIG_FILE', 'config.yaml'))
        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    yaml_config = yaml.safe_load(f)
                if isinstance(yaml_config, dict):
                    self._merge_config(yaml_config)
                    log.info(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError) as e:
                log.warning(f"Failed to load {config_path}: {e}. Using defaults.")
        else:
            log.debug(f"No {config_path} found. Using defaults and environment variables.")

        # Override with environment variables
        self._load_env_overrides()

    def _merge_config(self, new_config: Dict[str, Any]) -> None:
        """Recursively merge new config into existing config."""
        def merge(base: Dict, update: Dict, prefix: str = '') -> Dict:
            for key, value in update.items():
                if key in base and isinstance(base[key], dict):
                    if isinstance(value, dict):
                        merge(base[key], value, f"{prefix}{key}.")
                    else:
                        # A section must stay a mapping; keep the defaults
                        log.warning(f"Ignoring {prefix}{key}={value!r}: expected a mapping")
                else:
                    base[key] = value
            return base

        merge(self._config, new_config)

    def _load_env_overrides(self) -> None:
        """Load overrides from environment variables."""
        if name := os.getenv('PHYSIO_DISPLAY_NAME'):
            self._config['profile']['display_name'] = name

        if title := os.getenv('PHYSIO_PAGE_TITLE'):
            self._config['page']['title'] = title

        for key in ('width', 'height'):
            if raw := os.getenv(f'PHYSIO_CHART_{key.upper()}'):
                try:
                    self._config['chart'][key] = int(raw)
                except ValueError:
                    log.warning(f"Ignoring PHYSIO_CHART_{key.upper()}={raw!r}: not an integer")

        if raw := os.getenv('PHYSIO_CHART_FIT_CONTAINER'):
            self._config['chart']['fit_container'] = _parse_bool(raw)

        if level := os.getenv('PHYSIO_LOG_LEVEL'):
            self._config['logging']['level'] = level.upper()

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        Example:
            >>> config.get('page.layout')
            'wide'
            >>> config.get('chart.margin.right')
            30
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_display_name(self) -> str:
        """Name used in the header greeting."""
        return self.get('profile.display_name', 'Anna Mendes')

    def get_page_title(self) -> str:
        return self.get('page.title', DEFAULT_CONFIG['page']['title'])

    def get_page_icon(self) -> str:
        return self.get('page.icon', DEFAULT_CONFIG['page']['icon'])

    def get_layout(self) -> str:
        return self.get('page.layout', 'wide')

    def get_log_level(self) -> str:
        return str(self.get('logging.level', 'INFO')).upper()

    def get_chart_settings(self) -> ChartSettings:
        """Get chart geometry as an immutable settings object."""
        margin = self.get('chart.margin', {}) or {}
        return ChartSettings(
            width=int(self.get('chart.width', CHART_WIDTH)),
            height=int(self.get('chart.height', CHART_HEIGHT)),
            margin_top=int(margin.get('top', CHART_MARGIN['top'])),
            margin_right=int(margin.get('right', CHART_MARGIN['right'])),
            margin_bottom=int(margin.get('bottom', CHART_MARGIN['bottom'])),
            margin_left=int(margin.get('left', CHART_MARGIN['left'])),
            fit_container=bool(self.get('chart.fit_container', False)),
        )

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for key in ('width', 'height'):
            value = self.get(f'chart.{key}')
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(f"chart.{key} must be a positive integer, got {value!r}")

        margin = self.get('chart.margin', {})
        if not isinstance(margin, dict):
            errors.append(f"chart.margin must be a mapping, got {margin!r}")
        else:
            for side, value in margin.items():
                if side not in CHART_MARGIN:
                    errors.append(f"Unknown chart.margin side: {side}")
                elif not isinstance(value, int) or value < 0:
                    errors.append(f"chart.margin.{side} must be a non-negative integer, got {value!r}")

        if self.get_layout() not in VALID_LAYOUTS:
            errors.append(f"page.layout must be one of {sorted(VALID_LAYOUTS)}, got {self.get_layout()!r}")

        if self.get_log_level() not in VALID_LOG_LEVELS:
            errors.append(f"Unknown logging.level: {self.get_log_level()}")

        if not str(self.get_display_name()).strip():
            errors.append("profile.display_name is empty")

        return errors

    def __repr__(self) -> str:
        return f"Config({self._config})"


# Convenience functions for common operations
def get_config() -> Config:
    """Get the configuration singleton."""
    return Config()


def get_chart_settings() -> ChartSettings:
    """Get the configured chart geometry."""
    return get_config().get_chart_settings()
