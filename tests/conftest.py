# tests/conftest.py
from datetime import datetime

import pytest

from dogcenter.controller import DogController
from dogcenter.repository import Repo
from dogcenter.storage import DogStore


@pytest.fixture()
def store(tmp_path):
    s = DogStore(tmp_path / "dogcenter.db")
    s.initialize()
    yield s
    s.close()


@pytest.fixture()
def repo():
    return Repo()


@pytest.fixture()
def controller(store, repo):
    c = DogController(store, repo)
    c.refresh()
    return c


@pytest.fixture()
def clock():
    """Settable clock: clock.now is returned by clock()."""

    class _Clock:
        def __init__(self):
            self.now = datetime(2025, 10, 20, 8, 0, 0)

        def __call__(self):
            return self.now

    return _Clock()
