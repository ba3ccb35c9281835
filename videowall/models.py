from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Mapping

# Dokumentnøkler (camelCase på disk) ↔ feltnavn
STREAM_KEYS = ("topLeft", "topRight", "bottomLeft", "bottomRight")
_STREAM_FIELDS = {
    "topLeft": "top_left",
    "topRight": "top_right",
    "bottomLeft": "bottom_left",
    "bottomRight": "bottom_right",
}


def _str_or_empty(v: Any) -> str:
    if v is None:
        return ""
    return v if isinstance(v, str) else str(v)


@dataclass
class StreamSettings:
    # Én URL per kvadrant; tom streng = ingen kilde
    top_left: str = ""
    top_right: str = ""
    bottom_left: str = ""
    bottom_right: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "StreamSettings":
        """Manglende nøkler fylles med tom streng."""
        src = data or {}
        return cls(**{attr: _str_or_empty(src.get(key)) for key, attr in _STREAM_FIELDS.items()})

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, attr) for key, attr in _STREAM_FIELDS.items()}


@dataclass
class Playlist:
    id: str
    name: str
    icon: str
    streams: StreamSettings = field(default_factory=StreamSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Playlist":
        streams = data.get("streams")
        return cls(
            id=_str_or_empty(data.get("id")),
            name=_str_or_empty(data.get("name")),
            icon=_str_or_empty(data.get("icon")),
            streams=StreamSettings.from_dict(streams if isinstance(streams, Mapping) else None),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "streams": self.streams.to_dict(),
        }


@dataclass
class PlaylistsConfig:
    # Kan peke på en slettet id inntil en muterende operasjon reparerer den
    active_playlist: str = ""
    playlists: List[Playlist] = field(default_factory=list)

    def ids(self) -> List[str]:
        return [p.id for p in self.playlists]

    def find(self, playlist_id: str) -> Optional[Playlist]:
        for p in self.playlists:
            if p.id == playlist_id:
                return p
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activePlaylist": self.active_playlist,
            "playlists": [p.to_dict() for p in self.playlists],
        }


def get_defaults() -> Dict[str, Any]:
    """Tom mal for dokumentet (ny kopi hver gang)."""
    return {"activePlaylist": "", "playlists": []}
