"""Shared pytest fixtures and configuration for the projector test suite.

Guidelines
----------
* No test reads or writes the real home directory.
* Store files live under ``tmp_path``.
* Core tests must be pure — the backend is an in-memory fake.
"""

from __future__ import annotations

import json
from pathlib import Path, PurePosixPath

import pytest

from projector.core.models import StoreData
from projector.core.projector import Projector


def sample_data() -> StoreData:
    """Three nested levels, ``foo`` overridden at each, ``fem`` only at root."""
    return {
        "/": {"foo": "bar1", "fem": "meh"},
        "/foo": {"foo": "bar2"},
        "/foo/bar": {"foo": "bar3"},
    }


class MemoryBackend:
    """In-memory ``StoreBackend`` recording every save."""

    def __init__(self, data: StoreData | None = None) -> None:
        self.data: StoreData = data if data is not None else {}
        self.saved: list[StoreData] = []

    def load(self) -> StoreData:
        return {path: dict(values) for path, values in self.data.items()}

    def save(self, data: StoreData) -> None:
        snapshot = {path: dict(values) for path, values in data.items()}
        self.saved.append(snapshot)
        self.data = snapshot


@pytest.fixture()
def store_file(tmp_path: Path) -> Path:
    """A store file pre-populated with :func:`sample_data`."""
    path = tmp_path / "store" / "projector.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"projector": sample_data()}), encoding="utf-8")
    return path


@pytest.fixture()
def sample() -> StoreData:
    return sample_data()


@pytest.fixture()
def make_projector():
    """Factory building a :class:`Projector` over a :class:`MemoryBackend`."""
    def _make(pwd: str, data: StoreData | None = None) -> tuple[Projector, MemoryBackend]:
        backend = MemoryBackend(sample_data() if data is None else data)
        return Projector.load(backend, PurePosixPath(pwd)), backend

    return _make
