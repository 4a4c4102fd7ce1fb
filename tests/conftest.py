# Common pytest fixtures for all test modules
from pathlib import Path

import pytest

from skosifier import config
from skosifier.models import VocabTable

BASE = "http://example.org/voc/"

CS_SIMPLE = "vocab-simple.csv"
CS_FULL = "vocab-full.csv"
CS_BAD_ROW = "vocab-bad-row.csv"
CS_NO_ID = "vocab-no-id.csv"
CS_COMMA = "vocab-comma.csv"
CONFIG_TOML = "config.toml"


@pytest.fixture(scope="session")
def datadir():
    """DATADIR as a LocalPath"""
    return Path(__file__).resolve().parent / "data"


@pytest.fixture
def temp_config():
    """
    Provides a config that can be safely changed in test functions.

    After the test the config will be reset to default.
    """
    yield config
    config.load_config()


@pytest.fixture
def make_table():
    """Factory for tables from a header and lists of strings."""

    def _make_table(header, *rows):
        return VocabTable.from_rows(header, rows)

    return _make_table
