"""
Test configuration and fixtures for the grimoire bot test suite.
"""

import json
import pytest
from unittest.mock import AsyncMock, MagicMock

from grimoire.role_data import RoleStore


IMP = {
    "id": "imp",
    "name": "Imp",
    "type": "demon",
    "description": "Each night...",
    "icon": "http://x/imp.png",
}

FIVE_ROLES = [
    IMP,
    {"id": "washerwoman", "name": "Washerwoman", "type": "townsfolk", "description": "", "icon": ""},
    {"id": "drunk", "name": "Drunk", "type": "outsider", "description": "", "icon": ""},
    {"id": "poisoner", "name": "Poisoner", "type": "minion", "description": "", "icon": ""},
    {"id": "Scapegoat", "name": "Scapegoat", "type": "traveler", "description": "", "icon": ""},
]


@pytest.fixture
def write_roles(tmp_path):
    """Write a role document and return its path."""
    path = tmp_path / "roleData.json"

    def _write(content):
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def store(write_roles):
    """Role store loaded with five roles."""
    role_store = RoleStore(write_roles(FIVE_ROLES))
    role_store.load()
    return role_store


@pytest.fixture
def interaction():
    """Mock Discord interaction with an awaitable response."""
    mock = MagicMock()
    mock.response.send_message = AsyncMock()
    return mock
