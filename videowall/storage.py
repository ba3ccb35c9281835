# File: videowall/storage.py
# Purpose: Config-IO for playlists.yaml. Ingen cache: hvert kall leser fra disk.
from __future__ import annotations
import enum
import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set, Tuple

import yaml

from .ids import IdFactory, new_playlist_id
from .migrate import LegacyMigrator
from .models import Playlist, PlaylistsConfig, get_defaults
from .settings import StoragePaths, resolve_paths

logger = logging.getLogger(__name__)


class LoadSource(enum.Enum):
    CURRENT = "current"
    MIGRATED = "migrated"
    DEFAULTS = "defaults"


@dataclass
class LoadOutcome:
    config: PlaylistsConfig
    source: LoadSource
    # Kun relevant for MIGRATED: ble migreringen skrevet til disk?
    saved: bool = True


# ── coerce ────────────────────────────────────────────────────────────────────
def _coerce_playlists(seq: Any) -> List[Playlist]:
    if not isinstance(seq, list):
        if seq is not None:
            logger.warning("Ignoring 'playlists': expected a list, got %s", type(seq).__name__)
        return []
    out: List[Playlist] = []
    seen: Set[str] = set()
    for i, item in enumerate(seq):
        if not isinstance(item, dict):
            logger.warning("Skipping playlist #%d: not a mapping", i)
            continue
        p = Playlist.from_dict(item)
        if not p.id:
            logger.warning("Skipping playlist #%d: missing id", i)
            continue
        if p.id in seen:
            logger.warning("Skipping playlist #%d: duplicate id %r", i, p.id)
            continue
        seen.add(p.id)
        out.append(p)
    return out


def _coerce(data: Dict[str, Any]) -> PlaylistsConfig:
    """
    Feltvis merge over defaults: nøkler i dokumentet overstyrer,
    manglende nøkler beholder default-verdien.
    """
    merged = get_defaults()
    merged.update(data)
    active = merged.get("activePlaylist")
    return PlaylistsConfig(
        active_playlist="" if active is None else str(active),
        playlists=_coerce_playlists(merged.get("playlists")),
    )


# ── atomic write ──────────────────────────────────────────────────────────────
def _atomic_write(path: str, text: str) -> None:
    """Skriv til temp-fil i samme katalog og bytt inn med os.replace."""
    dirpath = os.path.dirname(path) or "."
    os.makedirs(dirpath, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".playlists.", dir=dirpath)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.unlink(tmp)


# ── store ─────────────────────────────────────────────────────────────────────
class PlaylistStore:
    """
    Tilstandsløs lagring. Holder bare baner og id-fabrikk; konfigurasjonen
    leses på nytt ved hvert load().
    """

    def __init__(
        self,
        paths: Optional[StoragePaths] = None,
        id_factory: IdFactory = new_playlist_id,
    ) -> None:
        self.paths = paths or resolve_paths()
        self.id_factory = id_factory

    def _read_current(self) -> Tuple[bool, Optional[PlaylistsConfig]]:
        """(fantes, config). config er None hvis dokumentet mangler eller ikke kan parses."""
        path = self.paths.current_path
        if not path.exists():
            return False, None
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError):
            logger.exception("Failed to load playlists from %s", path)
            return True, None
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.error(
                "Failed to load playlists from %s: expected a mapping, got %s",
                path,
                type(data).__name__,
            )
            return True, None
        return True, _coerce(data)

    def resolve(self) -> LoadOutcome:
        # 1) gjeldende dokument
        existed, cfg = self._read_current()
        if cfg is not None:
            return LoadOutcome(cfg, LoadSource.CURRENT)
        if existed:
            logger.warning("Current playlists document is unreadable; trying legacy migration")
        # 2) legacy-migrering, skrives straks slik at den kjører maks én gang
        migrated = LegacyMigrator(self.paths, self.id_factory).migrate()
        if migrated is not None:
            saved = self.save(migrated)
            if not saved:
                logger.warning("Migrated playlists could not be persisted; migration will rerun")
            return LoadOutcome(migrated, LoadSource.MIGRATED, saved=saved)
        # 3) defaults
        return LoadOutcome(_coerce({}), LoadSource.DEFAULTS)

    def load(self) -> PlaylistsConfig:
        return self.resolve().config

    def save(self, config: PlaylistsConfig) -> bool:
        path = self.paths.current_path
        try:
            text = yaml.safe_dump(
                config.to_dict(),
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
            )
            _atomic_write(str(path), text)
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to save playlists to %s", path)
            return False
        return True
