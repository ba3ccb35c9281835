# File: videowall/playlists.py
# Purpose: Playlist-operasjoner over PlaylistStore. Last → muter kopi → lagre.
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .ids import IdFactory, new_playlist_id
from .models import Playlist, PlaylistsConfig, StreamSettings
from .storage import PlaylistStore

logger = logging.getLogger(__name__)

StreamsInput = Union[StreamSettings, Mapping[str, Any], None]

_MAX_ID_ATTEMPTS = 10


class Outcome(enum.Enum):
    OK = "ok"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    SAVE_FAILED = "save_failed"


@dataclass
class OpResult:
    outcome: Outcome
    playlist: Optional[Playlist] = None
    config: Optional[PlaylistsConfig] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


def _streams(value: StreamsInput) -> StreamSettings:
    if isinstance(value, StreamSettings):
        return StreamSettings(**vars(value))
    return StreamSettings.from_dict(value)


# ── factory / resolver ────────────────────────────────────────────────────────
def create_playlist(
    name: str,
    icon: str,
    streams: StreamsInput = None,
    *,
    id_factory: IdFactory = new_playlist_id,
) -> Playlist:
    """Ny playlist med fersk id. Rører verken disk eller aktiv-peker."""
    return Playlist(id=id_factory(), name=name, icon=icon, streams=_streams(streams))


def get_active_playlist(config: PlaylistsConfig) -> Optional[Playlist]:
    if not config.active_playlist:
        return None
    return config.find(config.active_playlist)


def _repair_active(config: PlaylistsConfig) -> None:
    """Dinglende peker → første gjenværende playlist, ellers tom streng."""
    if config.active_playlist and config.find(config.active_playlist) is not None:
        return
    config.active_playlist = config.playlists[0].id if config.playlists else ""


def _persist(store: PlaylistStore, config: PlaylistsConfig, result: OpResult) -> OpResult:
    if store.save(config):
        return result
    return OpResult(Outcome.SAVE_FAILED, message="failed to save playlists")


def _invalid(message: str) -> OpResult:
    return OpResult(Outcome.INVALID, message=message)


# ── operations ────────────────────────────────────────────────────────────────
def list_config(store: PlaylistStore) -> PlaylistsConfig:
    return store.load()


def active_playlist(store: PlaylistStore) -> Optional[Playlist]:
    return get_active_playlist(store.load())


def add_playlist(
    store: PlaylistStore,
    name: Any,
    icon: Any,
    streams: Any = None,
) -> OpResult:
    if not isinstance(name, str) or not name.strip():
        return _invalid("'name' is required")
    if not isinstance(icon, str) or not icon.strip():
        return _invalid("'icon' is required")
    if streams is not None and not isinstance(streams, (Mapping, StreamSettings)):
        return _invalid("'streams' must be an object")
    config = store.load()
    taken = set(config.ids())
    for _ in range(_MAX_ID_ATTEMPTS):
        playlist = create_playlist(name, icon, streams, id_factory=store.id_factory)
        if playlist.id and playlist.id not in taken:
            break
    else:
        logger.error("No unique playlist id after %d attempts", _MAX_ID_ATTEMPTS)
        return _invalid("could not generate a unique playlist id")
    config.playlists.append(playlist)
    # Første playlist (eller dinglende peker) → blir aktiv
    if get_active_playlist(config) is None:
        config.active_playlist = playlist.id
    return _persist(store, config, OpResult(Outcome.OK, playlist=playlist, config=config))


def update_playlist(store: PlaylistStore, playlist_id: str, fields: Any) -> OpResult:
    if not isinstance(fields, Mapping):
        return _invalid("payload must be an object")
    for key in ("name", "icon"):
        if key in fields and not isinstance(fields[key], str):
            return _invalid(f"'{key}' must be a string")
    if "streams" in fields and not isinstance(fields["streams"], Mapping):
        return _invalid("'streams' must be an object")
    config = store.load()
    playlist = config.find(playlist_id)
    if playlist is None:
        return OpResult(Outcome.NOT_FOUND, message="playlist not found")
    if "name" in fields:
        playlist.name = fields["name"]
    if "icon" in fields:
        playlist.icon = fields["icon"]
    if "streams" in fields:
        playlist.streams = _streams(fields["streams"])
    _repair_active(config)
    return _persist(store, config, OpResult(Outcome.OK, playlist=playlist, config=config))


def delete_playlist(store: PlaylistStore, playlist_id: str) -> OpResult:
    config = store.load()
    playlist = config.find(playlist_id)
    if playlist is None:
        return OpResult(Outcome.NOT_FOUND, message="playlist not found")
    config.playlists.remove(playlist)
    _repair_active(config)
    logger.info("Deleted playlist %s; active is now %r", playlist_id, config.active_playlist)
    return _persist(store, config, OpResult(Outcome.OK, playlist=playlist, config=config))


def set_active_playlist(store: PlaylistStore, playlist_id: Any) -> OpResult:
    if not isinstance(playlist_id, str) or not playlist_id:
        return _invalid("'activePlaylist' is required")
    config = store.load()
    playlist = config.find(playlist_id)
    if playlist is None:
        return OpResult(Outcome.NOT_FOUND, message="playlist not found")
    config.active_playlist = playlist_id
    return _persist(store, config, OpResult(Outcome.OK, playlist=playlist, config=config))
