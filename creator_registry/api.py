import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .config import Settings, configure_logging, load_settings
from .errors import ErrorKind
from .registry import Registry, Result
from .store import JsonFileStore, MemoryStore

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ErrorKind.NOT_ADMIN_FOR_REGISTER: 403,
    ErrorKind.NOT_ADMIN_FOR_SET_ADMIN: 403,
    ErrorKind.NOT_OWNER: 403,
    ErrorKind.CONTENT_NOT_FOUND: 404,
    ErrorKind.VERIFICATION_FAILED: 404,
}


# ------------------- Pydantic Models -------------------
class RegisterRequest(BaseModel):
    sender: str = Field(min_length=1)
    content_id: str = Field(min_length=1)


class TransferRequest(BaseModel):
    sender: str = Field(min_length=1)
    content_id: str = Field(min_length=1)
    new_owner: str = Field(min_length=1)


class VerifyRequest(BaseModel):
    content_id: str = Field(min_length=1)
    creator: str = Field(min_length=1)


class SetAdminRequest(BaseModel):
    sender: str = Field(min_length=1)
    new_admin: str = Field(min_length=1)


def registry_from_settings(settings: Settings) -> Registry:
    if settings.state_path:
        logger.info(f"Using JSON registry state at {settings.state_path}")
        return Registry(JsonFileStore(settings.state_path, admin=settings.admin))
    logger.info("Using in-memory registry state")
    return Registry(MemoryStore(admin=settings.admin))


def _raise_for(result: Result) -> None:
    if result.is_err:
        raise HTTPException(
            status_code=STATUS_BY_ERROR[result.error],
            detail={"error": result.error.label, "code": result.error.code},
        )


def create_app(registry: Optional[Registry] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Builds the HTTP service. Without a registry one is built from the environment."""
    if registry is None:
        settings = settings or load_settings()
        configure_logging(settings.log_level)
        registry = registry_from_settings(settings)

    app = FastAPI(
        title="Creator Verification API",
        description="API for registering, transferring and verifying content ownership.",
        version="1.0.0",
    )

    # ------------------- API Routes -------------------
    @app.post("/content/register")
    def register_content(request: RegisterRequest):
        _raise_for(registry.register(request.sender, request.content_id))
        return {"ok": True}

    @app.post("/content/transfer")
    def transfer_content(request: TransferRequest):
        _raise_for(registry.transfer(request.sender, request.content_id, request.new_owner))
        return {"ok": True}

    @app.get("/content/{content_id}")
    def get_content_owner(content_id: str):
        return {"content_id": content_id, "owner": registry.get_owner(content_id)}

    @app.post("/verify")
    def verify_creator(request: VerifyRequest):
        result = registry.verify(request.content_id, request.creator)
        _raise_for(result)
        return {"ok": True, "verified": result.value}

    @app.get("/admin")
    def get_admin():
        return {"admin": registry.get_admin()}

    @app.post("/admin")
    def set_admin(request: SetAdminRequest):
        _raise_for(registry.set_admin(request.sender, request.new_admin))
        return {"ok": True}

    return app
