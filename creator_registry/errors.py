from enum import IntEnum


class ErrorKind(IntEnum):
    """Reasons a registry call is rejected, valued by their wire code."""

    NOT_ADMIN_FOR_REGISTER = 100
    CONTENT_NOT_FOUND = 101
    NOT_OWNER = 102
    VERIFICATION_FAILED = 104
    NOT_ADMIN_FOR_SET_ADMIN = 105

    @property
    def code(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        # NOT_ADMIN_FOR_REGISTER -> NotAdminForRegister
        return "".join(part.capitalize() for part in self.name.split("_"))


class CreatorRegistryError(Exception):
    """Base class for infrastructure failures (storage, configuration)."""


class RegistryStoreError(CreatorRegistryError):
    pass


class ConfigurationError(CreatorRegistryError):
    pass
