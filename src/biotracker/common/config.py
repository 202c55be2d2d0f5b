"""
Configuration management for Biomarker Tracker.

Loads and validates configuration from config.yaml (or environment variables as override).
"""
from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

log = logging.getLogger(__name__)

# Load .env file if it exists (for local development)
load_dotenv()

# Default configuration
DEFAULT_CONFIG = {
    'form': {
        'default_score': 5,
    },
    'dashboard': {
        'default_biomarkers': ['Sleep', 'Mood', 'Energy'],
        'default_range_days': 30,
        'recent_limit': 5,
    },
    'demo': {
        'enabled': True,
        'days': 31,
        'seed': None,
    },
    'feedback': {
        'saving_seconds': 0.5,
        'confirmed_seconds': 1.0,
    },
}

_FALSY = {'0', 'false', 'no', 'off'}


class Config:
    """
    Configuration singleton for the tracker.

    Loads configuration from:
    1. config.yaml in the working directory (if exists)
    2. Environment variables (as override)
    3. Defaults (as fallback)

    Example:
        >>> config = Config()
        >>> config.get_default_score()
        5
        >>> config.get('dashboard.recent_limit')
        5
    """

    _instance: Optional['Config'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config(Path(config_path or 'config.yaml'))
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded singleton so the next Config() reloads."""
        cls._instance = None

    def _load_config(self, config_path: Path) -> None:
        """Load configuration from config.yaml and environment."""
        # Nested dicts must not be shared with DEFAULT_CONFIG
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    yaml_config = yaml.safe_load(f)
                    if yaml_config:
                        self._merge_config(yaml_config)
                        log.info(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError) as e:
                log.warning(f"Failed to load {config_path}: {e}. Using defaults.")
        else:
            log.info(f"No {config_path.name} found. Using defaults and environment variables.")

        self._load_env_overrides()

    def _merge_config(self, new_config: Dict[str, Any]) -> None:
        """Recursively merge new config into existing config."""
        def merge(base: Dict, update: Dict) -> Dict:
            for key, value in update.items():
                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    merge(base[key], value)
                else:
                    base[key] = value
            return base

        merge(self._config, new_config)

    def _load_env_overrides(self) -> None:
        """Load overrides from environment variables."""
        if (score := self._env_number('TRACKER_DEFAULT_SCORE', float)) is not None:
            self._config['form']['default_score'] = score

        if names := os.getenv('TRACKER_DEFAULT_BIOMARKERS'):
            self._config['dashboard']['default_biomarkers'] = [
                n.strip() for n in names.split(',') if n.strip()
            ]

        if (range_days := self._env_number('TRACKER_RANGE_DAYS', int)) is not None:
            self._config['dashboard']['default_range_days'] = range_days

        if demo := os.getenv('TRACKER_DEMO_DATA'):
            self._config['demo']['enabled'] = demo.strip().lower() not in _FALSY

        if (seed := self._env_number('TRACKER_DEMO_SEED', int)) is not None:
            self._config['demo']['seed'] = seed

    @staticmethod
    def _env_number(name: str, cast):
        """Numeric env var, or None when unset or unparseable."""
        raw = os.getenv(name)
        if not raw:
            return None
        try:
            return cast(raw.strip())
        except ValueError:
            log.warning(f"Ignoring {name}={raw!r}: not a valid {cast.__name__}. Keeping configured value.")
            return None

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        Example:
            >>> config.get('demo.days')
            31
            >>> config.get('feedback.saving_seconds')
            0.5
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_default_score(self) -> float:
        """Get the score every slider starts at."""
        return self.get('form.default_score', 5)

    def get_default_biomarkers(self) -> list[str]:
        """Get the biomarker names selected when the dashboard opens."""
        return list(self.get('dashboard.default_biomarkers', []))

    def get_default_range_days(self) -> int:
        return self.get('dashboard.default_range_days', 30)

    def get_recent_limit(self) -> int:
        return self.get('dashboard.recent_limit', 5)

    def is_demo_enabled(self) -> bool:
        return bool(self.get('demo.enabled', True))

    def get_demo_days(self) -> int:
        return self.get('demo.days', 31)

    def get_demo_seed(self) -> Optional[int]:
        return self.get('demo.seed')

    def get_feedback_durations(self) -> tuple[float, float]:
        """
        Get the save-feedback phase durations.

        Returns:
            (saving_seconds, confirmed_seconds)
        """
        return (
            float(self.get('feedback.saving_seconds', 0.5)),
            float(self.get('feedback.confirmed_seconds', 1.0)),
        )

    def _problems(self) -> list[tuple[str, str]]:
        """(key path, message) for every invalid setting."""
        from biotracker.common.biomarkers import MAX_SCORE, MIN_SCORE, Biomarker

        problems = []

        score = self.get_default_score()
        if isinstance(score, bool) or not isinstance(score, (int, float)) or not MIN_SCORE <= score <= MAX_SCORE:
            problems.append((
                'form.default_score',
                f"form.default_score must be between {MIN_SCORE} and {MAX_SCORE}, got {score!r}",
            ))

        for name in self.get_default_biomarkers():
            try:
                Biomarker.parse(name)
            except ValueError as e:
                problems.append(('dashboard.default_biomarkers', f"dashboard.default_biomarkers: {e}"))

        for key in ('dashboard.default_range_days', 'dashboard.recent_limit', 'demo.days'):
            value = self.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                problems.append((key, f"{key} must be a positive integer, got {value!r}"))

        for key in ('feedback.saving_seconds', 'feedback.confirmed_seconds'):
            value = self.get(key)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                problems.append((key, f"{key} must be a non-negative number, got {value!r}"))

        return problems

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        return [message for _, message in self._problems()]

    def repair(self) -> list[str]:
        """
        Replace invalid settings so the app can start.

        Unknown biomarker names are dropped from the default selection; any
        other invalid value goes back to its DEFAULT_CONFIG value.

        Returns:
            The validation errors that were repaired
        """
        from biotracker.common.biomarkers import Biomarker

        problems = self._problems()
        for key_path in {key for key, _ in problems}:
            section, name = key_path.split('.')
            if key_path == 'dashboard.default_biomarkers':
                known = {b.value.lower() for b in Biomarker}
                value = [n for n in self.get_default_biomarkers() if str(n).strip().lower() in known]
            else:
                value = copy.deepcopy(DEFAULT_CONFIG[section][name])
            self._config.setdefault(section, {})[name] = value
            log.warning(f"Invalid {key_path}; using {value!r}")
        return [message for _, message in problems]

    def __repr__(self) -> str:
        return f"Config({self._config})"


# Convenience functions for common operations
def get_config() -> Config:
    """Get the configuration singleton."""
    return Config()
