# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - store             → empty ItemStore with default bounds
# - small_store       → empty ItemStore with capacity 3
# - data_path         → path to a (not yet created) data file under tmp_path
# - item_file         → ItemFile pointing at data_path
# - write_data        → helper writing raw text to data_path
# - make_app          → builds a RabbitHole driven by a scripted stdin
#
# NOTES:
# ------
# - Use tmp_path for temporary files
# - CLI output is captured in a StringIO, not on the real stdout
# ==============================================

import io

import pytest

from rabbit.cli import RabbitHole
from rabbit.persistence.item_file import ItemFile
from rabbit.store.item_store import ItemStore


@pytest.fixture
def store():
    """Empty store with the default capacity."""
    return ItemStore()


@pytest.fixture
def small_store():
    """Empty store that fills up after three items."""
    return ItemStore(capacity=3)


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "items.csv"


@pytest.fixture
def item_file(data_path):
    return ItemFile(data_path)


@pytest.fixture
def write_data(data_path):
    """Write raw text to the data file and return its path."""
    def _write(text: str):
        data_path.write_text(text, encoding="utf-8")
        return data_path
    return _write


@pytest.fixture
def make_app(item_file):
    """
    Build a RabbitHole whose stdin replays `script`.

    Returns (app, output) where output is the StringIO the app prints to.
    """
    def _make(script: str = "", store: ItemStore = None):
        output = io.StringIO()
        app = RabbitHole(
            store if store is not None else ItemStore(),
            item_file,
            stdin=io.StringIO(script),
            stdout=output,
        )
        return app, output
    return _make
