# videowall/settings.py
"""
Grunninnstillinger (baner og filnavn for lagring).
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

PROJECT_ROOT = Path(__file__).resolve().parents[1]
STORAGE_DIR = PROJECT_ROOT / "storage"
PLAYLISTS_FILENAME = "playlists.yaml"
LEGACY_FILENAME = "videourls.yaml"

DEFAULT_PLAYLIST_NAME = "Default"
DEFAULT_PLAYLIST_ICON = "tv"


@dataclass(frozen=True)
class StoragePaths:
    storage_dir: Path
    current_path: Path
    legacy_path: Path


def resolve_paths(storage_dir: Optional[Union[str, Path]] = None) -> StoragePaths:
    """
    Baner for gjeldende dokument og legacy-dokument.
    Rekkefølge: eksplisitt argument, VIDEOWALL_STORAGE_DIR, ellers <prosjekt>/storage.
    """
    if storage_dir is None:
        env_dir = (os.environ.get("VIDEOWALL_STORAGE_DIR") or "").strip()
        storage_dir = env_dir or STORAGE_DIR
    base = Path(storage_dir)
    return StoragePaths(
        storage_dir=base,
        current_path=base / PLAYLISTS_FILENAME,
        legacy_path=base / LEGACY_FILENAME,
    )
