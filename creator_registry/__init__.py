from .errors import ConfigurationError, CreatorRegistryError, ErrorKind, RegistryStoreError
from .registry import Registry, RegistryState, Result
from .store import JsonFileStore, MemoryStore

__all__ = [
    "ConfigurationError",
    "CreatorRegistryError",
    "ErrorKind",
    "JsonFileStore",
    "MemoryStore",
    "Registry",
    "RegistryState",
    "RegistryStoreError",
    "Result",
]
