# videowall/ids.py
from __future__ import annotations
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def new_playlist_id() -> str:
    return uuid.uuid4().hex
