# path: wsgi.py
# file: wsgi.py
"""
wsgi.py
"""
from __future__ import annotations

import logging
import os

from videowall import create_app

logging.basicConfig(
    level=(os.environ.get("VIDEOWALL_LOG_LEVEL") or "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()

if __name__ == "__main__":
    # Lokal dev: waitress om installert, ellers Flask dev-server.
    try:
        from waitress import serve  # type: ignore[reportMissingImports]
    except ImportError:
        app.run(host="0.0.0.0", port=5000, debug=True)
    else:
        serve(app, listen="0.0.0.0:5000")
