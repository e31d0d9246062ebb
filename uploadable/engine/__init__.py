"""Uploadable Engine — configuration, public path resolution, errors."""

from uploadable.engine.config import UploadableConfig, get_config, load_config  # noqa: F401
from uploadable.engine.paths import public_path  # noqa: F401

__all__ = [
    "UploadableConfig",
    "get_config",
    "load_config",
    "public_path",
]
