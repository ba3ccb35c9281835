# tests/conftest.py
import itertools
import sys
from pathlib import Path

import pytest

# Sørg for at "videowall" kan importeres
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from videowall.settings import resolve_paths
from videowall.storage import PlaylistStore


def counting_ids(prefix: str = "pl"):
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture
def paths(tmp_path):
    return resolve_paths(tmp_path / "storage")


@pytest.fixture
def store(paths):
    return PlaylistStore(paths, id_factory=counting_ids())
