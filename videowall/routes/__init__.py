# videowall/routes/__init__.py
from __future__ import annotations
# Re-eksporter blueprint-objektene. Ingen @app-dekoratorer her.
from .api import bp as api_bp  # type: ignore[reportMissingImports]
__all__ = ["api_bp"]
