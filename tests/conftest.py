"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from projectdescription import FileElement
from projectdescription.config import SerializationSettings


@pytest.fixture
def app_extension():
    """Product of an app extension target."""
    return FileElement.glob("Products/Widget.appex")


@pytest.fixture
def elements():
    """Three distinct file elements in a fixed order."""
    return [
        FileElement.glob("Extras/a.json"),
        FileElement.glob("Extras/b.json"),
        FileElement.folder_reference("Extras/Templates"),
    ]


@pytest.fixture
def settings(monkeypatch):
    """Default settings, isolated from PROJECTDESCRIPTION_* in the environment."""
    for key in ("EMIT_NULL_SUBPATH", "UNKNOWN_KEYS", "JSON_INDENT"):
        monkeypatch.delenv(f"PROJECTDESCRIPTION_{key}", raising=False)
    return SerializationSettings(_env_file=None)
