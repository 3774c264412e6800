"""Configuration loading for swash.

Settings come from a YAML file::

    platform: watch
    content_size_category: large
    bold_text: false
    strict: true
    font_dirs:
      - ./fonts
    log_level: INFO

The path is taken from the explicit argument, then the ``SWASH_CONFIG``
environment variable, then ``swash.yaml`` in the working directory. Only a
missing ``swash.yaml`` yields the defaults; a missing explicit or
``SWASH_CONFIG`` path raises FileNotFoundError.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from swash.exceptions import ConfigError
from swash.fonts.factory import FailurePolicy
from swash.styles import ContentSizeCategory, PlatformClass

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SWASH_CONFIG"
DEFAULT_CONFIG_NAME = "swash.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_KNOWN_KEYS = {
    "platform",
    "content_size_category",
    "bold_text",
    "strict",
    "font_dirs",
    "log_level",
}


@dataclass
class Config:
    platform: PlatformClass = PlatformClass.PHONE
    content_size_category: ContentSizeCategory | None = None
    bold_text: bool = False
    strict: bool = False
    font_dirs: list[Path] = field(default_factory=list)
    log_level: str = "WARNING"

    @property
    def policy(self) -> FailurePolicy:
        return FailurePolicy.STRICT if self.strict else FailurePolicy.FALLBACK

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> Config:
        """Build a config from parsed YAML, validating every value."""
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        config = cls()
        if "platform" in data:
            try:
                config.platform = PlatformClass(str(data["platform"]).lower())
            except ValueError:
                choices = ", ".join(p.value for p in PlatformClass)
                raise ConfigError(
                    f"Invalid platform {data['platform']!r} (expected one of {choices})"
                ) from None

        category = data.get("content_size_category")
        if category is not None:
            try:
                config.content_size_category = ContentSizeCategory.parse(str(category))
            except ValueError as e:
                raise ConfigError(str(e)) from e

        for key in ("bold_text", "strict"):
            if key in data:
                if not isinstance(data[key], bool):
                    raise ConfigError(f"'{key}' must be true or false")
                setattr(config, key, data[key])

        font_dirs = data.get("font_dirs") or []
        if not isinstance(font_dirs, list):
            raise ConfigError("'font_dirs' must be a list of paths")
        for entry in font_dirs:
            path = Path(str(entry)).expanduser()
            if not path.is_absolute() and base_dir is not None:
                path = base_dir / path
            config.font_dirs.append(path)

        if "log_level" in data:
            level = str(data["log_level"]).upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"Invalid log_level {data['log_level']!r}")
            config.log_level = level

        return config

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from YAML, falling back to defaults."""
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                path = Path(env_path)
            else:
                path = Path.cwd() / DEFAULT_CONFIG_NAME
                if not path.exists():
                    return cls()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")
        log.debug("Loaded config from %s", path)
        return cls.from_dict(data, base_dir=path.parent)
