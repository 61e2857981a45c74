# grimoire/role_data.py

import json
import logging
import threading
from dataclasses import dataclass

from grimoire.config import ROLES_FILE_PATH

ROLE_FIELDS = ("id", "name", "type", "description", "icon")


class RoleDataError(ValueError):
    """Raised when the role document can't be turned into a list of roles."""


@dataclass(frozen=True)
class Role:
    id: str
    name: str = ""
    type: str = ""
    description: str = ""
    icon: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Role":
        values = {}
        for field in ROLE_FIELDS:
            value = data.get(field)
            values[field] = "" if value is None else str(value)
        return cls(**values)


# Parse a JSON array of role objects
def parse_roles(text: str) -> list[Role]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise RoleDataError(f"role document is not valid JSON ({e})") from e

    if not isinstance(raw, list):
        raise RoleDataError("role document must be a JSON array")

    roles = []
    for position, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise RoleDataError(f"entry {position} is not an object")
        role = Role.from_dict(entry)
        if not role.id:
            logging.warning(f"Skipping role entry {position} without an id")
            continue
        roles.append(role)
    return roles


# Load role data from the JSON file
def read_roles(file_path: str) -> list[Role]:
    with open(file_path, "r", encoding="utf-8") as f:
        return parse_roles(f.read())


class RoleStore:
    """
    In-memory index of roles keyed by lower-cased id.

    Reloads build a complete new mapping and swap it in under a lock, so a
    lookup always sees either the old index or the new one, never a mix.
    """

    def __init__(self, file_path: str = ROLES_FILE_PATH):
        self.file_path = file_path
        self._roles: dict[str, Role] = {}
        self._lock = threading.Lock()

    def load(self) -> int:
        roles = read_roles(self.file_path)

        index = {}
        for role in roles:
            key = role.id.lower()
            if key in index:
                logging.warning(f"Duplicate role id '{role.id}', keeping the later entry")
            index[key] = role

        with self._lock:
            self._roles = index

        logging.info(f"Loaded {len(index)} roles from {self.file_path}")
        return len(index)

    def lookup(self, key: str) -> Role | None:
        roles = self._roles
        return roles.get(key.lower())

    def roles(self) -> list[Role]:
        return list(self._roles.values())

    def __len__(self):
        return len(self._roles)
