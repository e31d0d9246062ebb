"""
Uploadable Paths — resolve the application's public directory.

The public directory comes from uploadable.yaml (public_dir); relative values
are taken from the project root.
"""

from __future__ import annotations

from pathlib import Path

from uploadable.engine.config import find_project_root, get_config
from uploadable.utilities import dir_helper


def get_project_root() -> Path:
    """Return the project root directory."""
    return find_project_root()


def public_path(sub: str = "") -> str:
    """
    Return the canonical path of `sub` inside the public directory.

    Examples (project at /srv/app, default config):
        public_path()           → "/srv/app/public"
        public_path("upload/")  → "/srv/app/public/upload"
    """
    public_dir = get_config().public_dir
    if dir_helper.is_absolute(public_dir):
        base = public_dir
    else:
        base = dir_helper.join(get_project_root().as_posix(), public_dir)
    return dir_helper.join(base, sub)
