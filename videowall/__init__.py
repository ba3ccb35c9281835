# videowall/__init__.py
from __future__ import annotations
from pathlib import Path
from typing import Optional, Union
from flask import Flask, request, Response
from .ids import IdFactory, new_playlist_id
from .settings import resolve_paths
from .storage import PlaylistStore
def create_app(
    storage_dir: Optional[Union[str, Path]] = None,
    id_factory: IdFactory = new_playlist_id,
) -> Flask:
    app = Flask(__name__)
    # Tilstandsløs store: holder kun baner, leser disk ved hvert kall
    app.extensions["playlist_store"] = PlaylistStore(
        resolve_paths(storage_dir), id_factory=id_factory
    )
    # Registrer blueprints fra routes-pakken
    from .routes import api_bp
    app.register_blueprint(api_bp)
    @app.after_request
    def apply_common_headers(resp: Response) -> Response:
        # Basale headere
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        if (request.path or "").startswith("/api/"):
            resp.headers["Cache-Control"] = "no-store"
        return resp
    return app
