"""
Global Configuration and Defaults.

Constants used across the engine, plus the optional per-project settings
file at ``.canvasfilter/config.yaml``.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ValidationError

from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# --- Presentation ---
FULL_OPACITY = 1.0
FADED_OPACITY = 0.3

# --- Matching ---
# Absent and empty node colors share this matching category
COLORLESS = ""

# Tag-shaped tokens inside free text
TAG_PATTERN = r"#[^\s]+"

# --- Settings file ---
CONFIG_DIR = ".canvasfilter"
CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    """User-tunable defaults. CLI options take precedence."""
    display_mode: Literal["hide", "fade"] = "hide"
    vault: Optional[Path] = None


def config_path(root: Path) -> Path:
    return root / CONFIG_DIR / CONFIG_FILE


def load_settings(root: Path) -> Settings:
    """
    Load settings from ``<root>/.canvasfilter/config.yaml``.

    Missing files yield defaults. A relative ``vault`` is resolved
    against ``root``.
    """
    path = config_path(root)
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(raw).__name__}")

    try:
        settings = Settings(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    if settings.vault is not None and not settings.vault.is_absolute():
        settings = settings.model_copy(update={"vault": root / settings.vault})
    return settings
