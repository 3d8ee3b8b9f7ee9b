import logging
import os
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ValidationError

from .errors import RegistryStoreError
from .registry import RegistryState

logger = logging.getLogger(__name__)


class MemoryStore:
    """Keeps the registry state in process memory."""

    def __init__(self, admin: str):
        self._state = RegistryState(admin=admin)

    def load(self) -> RegistryState:
        return self._state.copy()

    def save(self, state: RegistryState) -> None:
        self._state = state.copy()


# ------------------- JSON file store -------------------
class StateDocument(BaseModel):
    admin: str
    owners: Dict[str, str] = {}


class JsonFileStore:
    """
    Keeps the registry state in a JSON file.

    A missing file is a fresh deployment seeded with `admin`. Each save writes
    a sibling temporary file and moves it over the old one.
    """

    def __init__(self, path, admin: str):
        self.path = Path(path)
        self.admin = admin

    def load(self) -> RegistryState:
        if not self.path.exists():
            return RegistryState(admin=self.admin)
        try:
            document = StateDocument.model_validate_json(self.path.read_bytes())
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            raise RegistryStoreError(f"Could not read registry state from {self.path}: {e}") from e
        return RegistryState(admin=document.admin, owners=dict(document.owners))

    def save(self, state: RegistryState) -> None:
        document = StateDocument(admin=state.admin, owners=state.owners)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise RegistryStoreError(f"Could not write registry state to {self.path}: {e}") from e
        logger.debug(f"Saved registry state to {self.path} ({len(state.owners)} entries)")
