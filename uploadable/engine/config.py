"""
Uploadable Configuration — Load and validate uploadable.yaml.

Usage:
    from uploadable.engine.config import load_config, get_config
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from uploadable.engine.errors import UploadableConfigError

logger = logging.getLogger("uploadable.engine.config")

CONFIG_FILE_NAME = "uploadable.yaml"

DEFAULT_MIME_TYPES = ["image/gif", "image/jpeg", "image/png"]
DEFAULT_UPLOAD_ATTRIBUTES = ["image", "image_mobile"]


# ---------------------------------------------------------------------------
# Pydantic models for uploadable.yaml
# ---------------------------------------------------------------------------

class UploadDefaultsConfig(BaseModel):
    """Values applied by UploadOptions.get_upload_options_default()."""
    create_dir_mode_mask: str = "0755"
    append_model_id_suffix: bool = True
    file_name_suffix_separator: str = "_"
    upload_attributes: List[str] = Field(default_factory=lambda: list(DEFAULT_UPLOAD_ATTRIBUTES))
    allowed_mime_types: List[str] = Field(default_factory=lambda: list(DEFAULT_MIME_TYPES))

    @field_validator("create_dir_mode_mask")
    @classmethod
    def validate_mask(cls, v: str) -> str:
        try:
            int(v, 8)
        except ValueError:
            raise ValueError(f"create_dir_mode_mask must be an octal string, got '{v}'")
        return v


class UploadableConfig(BaseModel):
    """Root model for uploadable.yaml."""
    public_dir: str = "public"
    upload_dir: str = "upload/"
    defaults: UploadDefaultsConfig = UploadDefaultsConfig()


# ---------------------------------------------------------------------------
# Config Loading Functions
# ---------------------------------------------------------------------------

_config: Optional[UploadableConfig] = None


def find_project_root() -> Path:
    """Find the project root by looking for uploadable.yaml."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / CONFIG_FILE_NAME).exists():
            return parent
    return current


def load_config(config_path: Optional[str] = None) -> UploadableConfig:
    """
    Load and validate uploadable.yaml.

    Args:
        config_path: Explicit path to uploadable.yaml. If None, auto-discovers.

    Returns:
        Validated UploadableConfig instance.

    Raises:
        UploadableConfigError: if the file is not valid YAML or fails validation.
    """
    global _config

    if config_path is None:
        config_path = str(find_project_root() / CONFIG_FILE_NAME)

    path = Path(config_path)
    if not path.exists():
        # Return defaults if no config file
        _config = UploadableConfig()
        return _config

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise UploadableConfigError(
            f"Could not parse {path.name}: {e}", config_path=str(path)
        ) from e

    if not isinstance(raw, dict):
        raise UploadableConfigError(
            f"{path.name} must contain a mapping", config_path=str(path)
        )

    # Settings may be wrapped under an "uploadable:" key
    data = raw.get("uploadable", raw) or {}
    if not isinstance(data, dict):
        raise UploadableConfigError(
            f"{path.name} must contain a mapping", config_path=str(path)
        )

    try:
        _config = UploadableConfig(**data)
    except ValidationError as e:
        raise UploadableConfigError(
            f"Invalid {path.name}: {e.error_count()} error(s)",
            config_path=str(path),
            errors=e.errors(),
        ) from e

    logger.info(f"Loaded upload config from {path}")
    return _config


def get_config() -> UploadableConfig:
    """Get the currently loaded config, loading if necessary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the loaded config so the next get_config() reloads it."""
    global _config
    _config = None
