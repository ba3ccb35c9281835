# tests/test_playlists.py
"""
Operasjoner: opprett/oppdater/slett/aktiver, inkl. reparasjon av aktiv-peker.
"""
from videowall import playlists as pl
from videowall.models import Playlist, PlaylistsConfig, StreamSettings
from videowall.playlists import Outcome
from videowall.storage import PlaylistStore


class FailingSaveStore(PlaylistStore):
    def save(self, config):
        return False


def test_create_playlist_defaults():
    p = pl.create_playlist("Lobby", "tv", id_factory=lambda: "x1")
    assert p == Playlist("x1", "Lobby", "tv", StreamSettings())


def test_create_playlist_merges_partial_streams():
    p = pl.create_playlist("Lobby", "tv", {"topRight": "u"})
    assert p.streams.to_dict() == {"topLeft": "", "topRight": "u", "bottomLeft": "", "bottomRight": ""}


def test_create_playlist_copies_stream_settings():
    s = StreamSettings(top_left="a")
    p = pl.create_playlist("Lobby", "tv", s)
    s.top_left = "changed"
    assert p.streams.top_left == "a"


def test_hundred_distinct_ids():
    ids = {pl.create_playlist(f"p{i}", "tv").id for i in range(100)}
    assert len(ids) == 100


def test_get_active_playlist():
    a, b = Playlist("a", "A", "tv"), Playlist("b", "B", "tv")
    assert pl.get_active_playlist(PlaylistsConfig("b", [a, b])) is b
    assert pl.get_active_playlist(PlaylistsConfig("", [a, b])) is None
    dangling = PlaylistsConfig("gone", [a, b])
    assert pl.get_active_playlist(dangling) is None
    # Ingen reparasjon
    assert dangling.active_playlist == "gone"


def test_first_create_activates(store):
    res = pl.add_playlist(store, "Lobby", "tv")
    assert res.outcome is Outcome.OK
    assert store.load().active_playlist == res.playlist.id


def test_second_create_keeps_active(store):
    first = pl.add_playlist(store, "A", "tv").playlist
    pl.add_playlist(store, "B", "tv")
    cfg = store.load()
    assert cfg.active_playlist == first.id
    assert [p.name for p in cfg.playlists] == ["A", "B"]


def test_create_repairs_dangling_active(store):
    store.save(PlaylistsConfig("gone", []))
    res = pl.add_playlist(store, "A", "tv")
    assert store.load().active_playlist == res.playlist.id


def test_create_requires_name_and_icon(store, paths):
    assert pl.add_playlist(store, "", "tv").outcome is Outcome.INVALID
    assert pl.add_playlist(store, "A", None).outcome is Outcome.INVALID
    assert pl.add_playlist(store, "A", "tv", streams=["x"]).outcome is Outcome.INVALID
    assert not paths.current_path.exists()


def test_hundred_creates_in_store_are_unique(paths):
    st = PlaylistStore(paths)
    for i in range(100):
        assert pl.add_playlist(st, f"p{i}", "tv").ok
    assert len(set(st.load().ids())) == 100


def test_update_applies_only_present_fields(store):
    p = pl.add_playlist(store, "A", "tv", {"topLeft": "u"}).playlist
    res = pl.update_playlist(store, p.id, {"name": "Renamed", "unknown": 1})
    assert res.ok
    got = store.load().find(p.id)
    assert got.name == "Renamed"
    assert got.icon == "tv"
    assert got.streams.top_left == "u"


def test_update_replaces_streams_with_defaults(store):
    p = pl.add_playlist(store, "A", "tv", {"topLeft": "u", "topRight": "v"}).playlist
    pl.update_playlist(store, p.id, {"streams": {"bottomLeft": "w"}})
    assert store.load().find(p.id).streams.to_dict() == {
        "topLeft": "",
        "topRight": "",
        "bottomLeft": "w",
        "bottomRight": "",
    }


def test_update_outcomes(store):
    p = pl.add_playlist(store, "A", "tv").playlist
    assert pl.update_playlist(store, "nope", {"name": "x"}).outcome is Outcome.NOT_FOUND
    assert pl.update_playlist(store, p.id, {"name": 5}).outcome is Outcome.INVALID
    assert pl.update_playlist(store, p.id, {"streams": "x"}).outcome is Outcome.INVALID
    assert pl.update_playlist(store, p.id, "x").outcome is Outcome.INVALID


def test_delete_active_reassigns_to_first_remaining(store):
    a = pl.add_playlist(store, "A", "tv").playlist
    b = pl.add_playlist(store, "B", "tv").playlist
    assert store.load().active_playlist == a.id

    assert pl.delete_playlist(store, a.id).ok
    assert store.load().active_playlist == b.id

    assert pl.delete_playlist(store, b.id).ok
    assert store.load() == PlaylistsConfig()


def test_delete_non_active_keeps_active(store):
    a = pl.add_playlist(store, "A", "tv").playlist
    b = pl.add_playlist(store, "B", "tv").playlist
    pl.delete_playlist(store, b.id)
    assert store.load().active_playlist == a.id


def test_delete_unknown(store):
    assert pl.delete_playlist(store, "nope").outcome is Outcome.NOT_FOUND


def test_set_active(store):
    pl.add_playlist(store, "A", "tv")
    b = pl.add_playlist(store, "B", "tv").playlist
    assert pl.set_active_playlist(store, b.id).ok
    assert pl.active_playlist(store) == b
    assert pl.set_active_playlist(store, "nope").outcome is Outcome.NOT_FOUND
    assert pl.set_active_playlist(store, "").outcome is Outcome.INVALID
    assert pl.set_active_playlist(store, None).outcome is Outcome.INVALID
    assert store.load().active_playlist == b.id


def test_save_failure_is_reported(paths):
    st = FailingSaveStore(paths)
    res = pl.add_playlist(st, "A", "tv")
    assert res.outcome is Outcome.SAVE_FAILED
    assert not res.ok
    assert st.load() == PlaylistsConfig()


def test_list_config(store):
    p = pl.add_playlist(store, "A", "tv").playlist
    assert pl.list_config(store) == PlaylistsConfig(p.id, [p])


def test_create_redraws_colliding_ids(paths):
    ids = iter(["same", "same", "same", "other"])
    st = PlaylistStore(paths, id_factory=lambda: next(ids))
    assert pl.add_playlist(st, "A", "tv").playlist.id == "same"
    assert pl.add_playlist(st, "B", "tv").playlist.id == "other"
    assert st.load().ids() == ["same", "other"]


def test_create_gives_up_on_constant_ids(paths):
    st = PlaylistStore(paths, id_factory=lambda: "same")
    assert pl.add_playlist(st, "A", "tv").ok
    res = pl.add_playlist(st, "B", "tv")
    assert res.outcome is Outcome.INVALID
    assert st.load().ids() == ["same"]


def test_delete_after_duplicate_ids_on_disk(store, paths):
    import yaml
    paths.current_path.parent.mkdir(parents=True)
    paths.current_path.write_text(
        yaml.safe_dump(
            {"activePlaylist": "x", "playlists": [{"id": "x", "name": "A"}, {"id": "x", "name": "B"}]}
        ),
        encoding="utf-8",
    )
    assert pl.delete_playlist(store, "x").ok
    assert store.load() == PlaylistsConfig()
