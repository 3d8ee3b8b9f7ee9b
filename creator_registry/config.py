import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from .errors import ConfigurationError


class Settings(BaseModel):
    admin: str
    state_path: Optional[str] = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Reads the service settings from the environment (and a `.env` file, if any)."""
    load_dotenv()

    admin = os.getenv("REGISTRY_ADMIN")
    if not admin or not admin.strip():
        raise ConfigurationError("REGISTRY_ADMIN not found in environment variables")

    state_path = os.getenv("REGISTRY_STATE_PATH")
    return Settings(
        admin=admin.strip(),
        state_path=state_path if state_path and state_path.strip() else None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
