"""
Uploadable Test Suite — Shared fixtures and configuration.

Run:  pytest tests/ -v
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Reset the config singleton and run each test from a clean directory."""
    import uploadable.engine.config as cfg_mod

    monkeypatch.chdir(tmp_path)
    cfg_mod._config = None
    yield
    cfg_mod._config = None


@pytest.fixture
def project_root(tmp_path):
    """
    Create a minimal project tree with uploadable.yaml and a public/ dir.
    Returns the root Path.
    """
    root = tmp_path / "project"
    (root / "public" / "upload").mkdir(parents=True)
    (root / "uploadable.yaml").write_text(
        "uploadable:\n"
        "  public_dir: public\n"
        "  upload_dir: media/\n"
        "  defaults:\n"
        "    create_dir_mode_mask: '0750'\n"
        "    file_name_suffix_separator: '-'\n"
        "    upload_attributes:\n"
        "      - cover\n"
        "    allowed_mime_types:\n"
        "      - image/webp\n",
        encoding="utf-8",
    )
    return root
