"""YAML config loader with defaults and variant registry merging."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import click
import yaml
from dotenv import load_dotenv

from version_sync.variants import DEFAULT_VARIANTS, Variant

CONFIG_FILENAME = "version-sync.yaml"
LOG_LEVEL_ENV = "VERSION_SYNC_LOG_LEVEL"


def get_app_dir() -> Path:
    """Get the platform-specific application config directory.

    - macOS: ~/Library/Application Support/version-sync/
    - Windows: C:\\Users\\<user>\\AppData\\Roaming\\version-sync\\
    - Linux: ~/.config/version-sync/
    """
    return Path(click.get_app_dir("version-sync"))


_DEFAULT_CONFIG = {
    "variants": {name: variant.to_dict() for name, variant in DEFAULT_VARIANTS.items()},
    "logging": {"level": "INFO", "file": None, "max_size_mb": 5, "backup_count": 3},
}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base, returning a new dict."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Tool configuration loaded from YAML with env var support."""

    def __init__(self, data: dict[str, Any], project_root: Path):
        self._data = data
        self.project_root = project_root

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Config:
        """Load config from YAML file, merging with defaults.

        Resolution order:
        1. Explicit config_path argument
        2. CWD ./config/version-sync.yaml
        3. APP_DIR/config.yaml

        Variant paths resolve against the working directory.
        """
        project_root = Path.cwd()
        if config_path is not None:
            config_path = Path(config_path)
        else:
            cwd_config = project_root / "config" / CONFIG_FILENAME
            app_dir_config = get_app_dir() / "config.yaml"
            if cwd_config.exists():
                config_path = cwd_config
            elif app_dir_config.exists():
                config_path = app_dir_config
            else:
                # Defaults only
                config_path = cwd_config

        env_path = project_root / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        user_config: dict = {}
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                user_config = yaml.safe_load(f) or {}

        data = _deep_merge(_DEFAULT_CONFIG, user_config)
        return cls(data, project_root)

    def get(self, *keys: str, default: Any = None) -> Any:
        """Get a nested config value using dot-separated keys or varargs."""
        if len(keys) == 1 and "." in keys[0]:
            keys = tuple(keys[0].split("."))

        current = self._data
        for key in keys:
            if isinstance(current, dict):
                current = current.get(key)
                if current is None:
                    return default
            else:
                return default
        return current

    @property
    def variant_names(self) -> list[str]:
        """Names of configured variants, skipping ones set to null."""
        variants = self._data.get("variants") or {}
        return sorted(name for name, data in variants.items() if data is not None)

    def variant(self, name: str) -> Variant:
        """Build one variant, validating only its own entry."""
        if name not in self.variant_names:
            raise KeyError(f"Unknown variant '{name}'")
        return Variant.from_dict(name, self._data["variants"][name])

    @property
    def log_level(self) -> str:
        return os.environ.get(LOG_LEVEL_ENV) or self.get("logging.level", default="INFO")

    @property
    def log_file(self) -> Path | None:
        log = self.get("logging.file")
        return self.project_root / log if log else None
