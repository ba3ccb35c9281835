# videowall/migrate.py
"""
Engangsmigrering fra det gamle flate formatet (videourls.yaml) til
playlists-dokumentet. Kalles kun fra PlaylistStore.resolve().
"""
from __future__ import annotations
import logging
from typing import Optional

import yaml

from .ids import IdFactory, new_playlist_id
from .models import Playlist, PlaylistsConfig, StreamSettings
from .settings import DEFAULT_PLAYLIST_ICON, DEFAULT_PLAYLIST_NAME, StoragePaths

logger = logging.getLogger(__name__)


class LegacyMigrator:
    def __init__(self, paths: StoragePaths, id_factory: IdFactory = new_playlist_id) -> None:
        self.paths = paths
        self.id_factory = id_factory

    def migrate(self) -> Optional[PlaylistsConfig]:
        path = self.paths.legacy_path
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError):
            logger.exception("Failed to migrate legacy settings from %s", path)
            return None
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.error(
                "Failed to migrate legacy settings from %s: expected a mapping, got %s",
                path,
                type(data).__name__,
            )
            return None
        playlist = Playlist(
            id=self.id_factory(),
            name=DEFAULT_PLAYLIST_NAME,
            icon=DEFAULT_PLAYLIST_ICON,
            streams=StreamSettings.from_dict(data),
        )
        logger.info("Migrated legacy settings from %s into playlist %s", path, playlist.id)
        return PlaylistsConfig(active_playlist=playlist.id, playlists=[playlist])
