from __future__ import annotations

from fastapi import HTTPException, Request

from unilinker.config import ServerConfig
from unilinker.registry import UniversityRegistry


def get_registry(request: Request) -> UniversityRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise HTTPException(status_code=500, detail="Registry not initialized")
    return registry


def get_config(request: Request) -> ServerConfig:
    config = getattr(request.app.state, "config", None)
    if config is None:
        raise HTTPException(status_code=500, detail="Config not initialized")
    return config


def request_origin(request: Request) -> tuple[str, str]:
    """Scheme and host (with port, if any) the client used to reach us."""

    host = request.headers.get("host") or request.url.netloc
    return request.url.scheme, host
