# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from adapters.collection_store import JsonTaskCollectionStore
from core.domain.models import TaskCollection

from .typical_tasks import typical_collection

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture()
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    """Configured data file for the store under test (not created)."""
    return tmp_path / "data" / "tasks.json"


@pytest.fixture()
def store(store_path: Path) -> JsonTaskCollectionStore:
    return JsonTaskCollectionStore(store_path)


@pytest.fixture()
def collection() -> TaskCollection:
    return typical_collection()
