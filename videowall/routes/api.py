# File: videowall/routes/api.py
from __future__ import annotations
from typing import Any, Dict

from flask import Blueprint, request, jsonify, Response, current_app

from ..playlists import (
    Outcome,
    OpResult,
    active_playlist,
    add_playlist,
    delete_playlist,
    list_config,
    set_active_playlist,
    update_playlist,
)
from ..storage import PlaylistStore

bp = Blueprint("api", __name__, url_prefix="/api")

_STATUS = {
    Outcome.INVALID: (400, "validation_error"),
    Outcome.NOT_FOUND: (404, "not_found"),
    Outcome.SAVE_FAILED: (500, "save_failed"),
}

# ── utils ──────────────────────────────────────────────────────────────────────
def _store() -> PlaylistStore:
    return current_app.extensions["playlist_store"]

def _json_ok(payload: Dict[str, Any], status: int = 200) -> Response:
    resp = jsonify({"ok": True, **payload})
    resp.status_code = status
    resp.headers["Cache-Control"] = "no-store"
    return resp

def _json_err(
    message: str,
    *,
    status: int = 400,
    code: str | None = None,
) -> Response:
    data = {"ok": False, "error": message}
    if code:
        data["code"] = code
    resp = jsonify(data)
    resp.status_code = status
    resp.headers["Cache-Control"] = "no-store"
    return resp

def _is_json_request() -> bool:
    ctype = (request.headers.get("Content-Type") or "").lower()
    return "application/json" in ctype or request.is_json

def _json_body() -> Dict[str, Any] | Response:
    """Returner dict-payload, eller en ferdig feilrespons."""
    if not _is_json_request():
        return _json_err(
            "expected application/json", status=415, code="unsupported_media_type"
        )
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _json_err(
            "payload must be a JSON object", status=400, code="bad_request"
        )
    return data

def _result_err(result: OpResult) -> Response:
    status, code = _STATUS[result.outcome]
    return _json_err(result.message or code, status=status, code=code)

# ── playlists ──────────────────────────────────────────────────────────────────
@bp.get("/playlists")
def api_list_playlists() -> Response:
    try:
        cfg = list_config(_store())
        return _json_ok({"config": cfg.to_dict()})
    except Exception:
        current_app.logger.exception("GET /api/playlists failed")
        return _json_err("internal error", status=500, code="internal_error")

@bp.post("/playlists")
def api_create_playlist() -> Response:
    data = _json_body()
    if isinstance(data, Response):
        return data
    try:
        result = add_playlist(
            _store(), data.get("name"), data.get("icon"), data.get("streams")
        )
        if not result.ok:
            return _result_err(result)
        return _json_ok({"playlist": result.playlist.to_dict()}, status=201)
    except Exception:
        current_app.logger.exception("POST /api/playlists failed")
        return _json_err("internal error", status=500, code="internal_error")

@bp.get("/playlists/active")
def api_get_active() -> Response:
    try:
        playlist = active_playlist(_store())
        return _json_ok({"playlist": playlist.to_dict() if playlist else None})
    except Exception:
        current_app.logger.exception("GET /api/playlists/active failed")
        return _json_err("internal error", status=500, code="internal_error")

@bp.put("/playlists/active")
def api_set_active() -> Response:
    data = _json_body()
    if isinstance(data, Response):
        return data
    try:
        result = set_active_playlist(_store(), data.get("activePlaylist"))
        if not result.ok:
            return _result_err(result)
        return _json_ok({"activePlaylist": result.config.active_playlist})
    except Exception:
        current_app.logger.exception("PUT /api/playlists/active failed")
        return _json_err("internal error", status=500, code="internal_error")

@bp.put("/playlists/<playlist_id>")
def api_update_playlist(playlist_id: str) -> Response:
    data = _json_body()
    if isinstance(data, Response):
        return data
    try:
        result = update_playlist(_store(), playlist_id, data)
        if not result.ok:
            return _result_err(result)
        return _json_ok({"playlist": result.playlist.to_dict()})
    except Exception:
        current_app.logger.exception("PUT /api/playlists/%s failed", playlist_id)
        return _json_err("internal error", status=500, code="internal_error")

@bp.delete("/playlists/<playlist_id>")
def api_delete_playlist(playlist_id: str) -> Response:
    try:
        result = delete_playlist(_store(), playlist_id)
        if not result.ok:
            return _result_err(result)
        return _json_ok({"activePlaylist": result.config.active_playlist})
    except Exception:
        current_app.logger.exception("DELETE /api/playlists/%s failed", playlist_id)
        return _json_err("internal error", status=500, code="internal_error")
