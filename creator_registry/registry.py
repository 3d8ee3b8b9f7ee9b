"""
Off-chain rendition of the creator verification contract.

State is an explicit `RegistryState` value. The four operations are plain
functions of (state, caller, arguments) that return a `Result`; rejected
calls never touch the state. `Registry` binds the operations to a storage
handle and commits successful calls.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import ErrorKind

logger = logging.getLogger(__name__)


@dataclass
class RegistryState:
    admin: str
    owners: Dict[str, str] = field(default_factory=dict)

    def copy(self) -> "RegistryState":
        return RegistryState(admin=self.admin, owners=dict(self.owners))


@dataclass(frozen=True)
class Result:
    """Outcome of a registry call: either a value or an `ErrorKind`."""

    value: Any = None
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, value: Any = True) -> "Result":
        return cls(value=value)

    @classmethod
    def err(cls, error: ErrorKind) -> "Result":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None


# ------------------- Pure operations -------------------


def register(state: RegistryState, caller: str, content_id: str) -> Result:
    """Registers `content_id` under the admin, overwriting any previous owner."""
    if caller != state.admin:
        return Result.err(ErrorKind.NOT_ADMIN_FOR_REGISTER)
    state.owners[content_id] = caller
    return Result.ok()


def transfer(state: RegistryState, caller: str, content_id: str, new_owner: str) -> Result:
    """Hands `content_id` to `new_owner`. Only the current owner may do this."""
    current_owner = state.owners.get(content_id)
    if current_owner is None:
        return Result.err(ErrorKind.CONTENT_NOT_FOUND)
    if caller != current_owner:
        return Result.err(ErrorKind.NOT_OWNER)
    state.owners[content_id] = new_owner
    return Result.ok()


def verify(state: RegistryState, content_id: str, claimed_creator: str) -> Result:
    """
    Succeeds with True when `claimed_creator` owns `content_id`.

    Unknown content and a wrong creator both fail with VERIFICATION_FAILED;
    there is no ok(False) outcome.
    """
    owner = state.owners.get(content_id)
    if owner is not None and owner == claimed_creator:
        return Result.ok(True)
    return Result.err(ErrorKind.VERIFICATION_FAILED)


def set_admin(state: RegistryState, caller: str, new_admin: str) -> Result:
    if caller != state.admin:
        return Result.err(ErrorKind.NOT_ADMIN_FOR_SET_ADMIN)
    state.admin = new_admin
    return Result.ok()


# ------------------- Registry -------------------


class Registry:
    """Serializes calls against a storage handle and commits the successful ones."""

    def __init__(self, store):
        self.store = store
        self._lock = threading.Lock()

    def register(self, caller: str, content_id: str) -> Result:
        return self._apply(register, "register", caller, content_id)

    def transfer(self, caller: str, content_id: str, new_owner: str) -> Result:
        return self._apply(transfer, "transfer", caller, content_id, new_owner)

    def set_admin(self, caller: str, new_admin: str) -> Result:
        return self._apply(set_admin, "set_admin", caller, new_admin)

    def verify(self, content_id: str, claimed_creator: str) -> Result:
        with self._lock:
            state = self.store.load()
        return verify(state, content_id, claimed_creator)

    def get_admin(self) -> str:
        with self._lock:
            return self.store.load().admin

    def get_owner(self, content_id: str) -> Optional[str]:
        with self._lock:
            return self.store.load().owners.get(content_id)

    def _apply(self, operation, name: str, caller: str, *args) -> Result:
        with self._lock:
            state = self.store.load()
            result = operation(state, caller, *args)
            if result.is_err:
                logger.warning(f"{name} rejected for {caller}: {result.error.label} ({result.error.code})")
                return result
            self.store.save(state)
        logger.info(f"{name} by {caller} committed: {args}")
        return result
