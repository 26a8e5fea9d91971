"""Configuration for the candlekit CLI.

Settings are read from ``~/.config/candlekit/config.toml`` or from the path
in ``CANDLEKIT_CONFIG``. A missing or unreadable file yields defaults.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CANDLEKIT_CONFIG"
DISPLAY_KEYS = ("max_rows", "precision")
FILTER_KEYS = ("exclude_before", "exclude_after")


class Settings(BaseModel):
    """CLI display and filter defaults."""

    max_rows: int = Field(default=20, gt=0, description="Rows shown by table output")
    precision: int = Field(default=2, ge=0, description="Decimal places for prices")
    exclude_before: Optional[int] = Field(default=None, ge=0, description="Default lower bound")
    exclude_after: Optional[int] = Field(default=None, ge=0, description="Default upper bound")

    model_config = {"frozen": True}


def get_config_path() -> Path:
    """Return the config file location."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "candlekit" / "config.toml"


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings from TOML, falling back to defaults."""
    config_path = config_path or get_config_path()

    if not config_path.exists():
        logger.info("No config at %s, using defaults", config_path)
        return Settings()

    try:
        config = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.info("Could not read config %s (%s), using defaults", config_path, e)
        return Settings()

    display = config.get("display", {})
    filters = config.get("filter", {})
    if not isinstance(display, dict) or not isinstance(filters, dict):
        logger.info("Config %s has non-table display/filter sections, using defaults", config_path)
        return Settings()

    values = {key: display[key] for key in DISPLAY_KEYS if key in display}
    values.update({key: filters[key] for key in FILTER_KEYS if key in filters})

    try:
        return Settings(**values)
    except ValidationError as e:
        logger.info("Invalid values in config %s (%s), using defaults", config_path, e)
        return Settings()


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Write a template config file and return its path."""
    config_path = config_path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "display": {
            "max_rows": 20,
            "precision": 2,
        },
        # Leave bounds out to keep every candle
        "filter": {},
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path
