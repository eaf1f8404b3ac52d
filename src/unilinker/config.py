from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

CONFIG_ENV = "UNILINKER_CONFIG"
PORT_ENV = "PORT"
BIND_ENV = "UNILINKER_BIND"


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)


class LandingConfig(BaseModel):
    fallback_timeout_ms: int = Field(
        default=2500,
        ge=0,
        description="How long the landing page waits for the app before showing the install prompt.",
    )


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    file: str | None = Field(
        default=None, description="Optional log file; rotated by size when set."
    )
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


class UniversityEntry(BaseModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    short_name: str = Field(min_length=1)
    location: str = Field(default="")


class RegistryConfig(BaseModel):
    include_defaults: bool = Field(
        default=True, description="Keep the built-in Harvard/BUET/UIU entries."
    )
    universities: list[UniversityEntry] = Field(default_factory=list)


class ServerConfig(BaseModel):
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    landing: LandingConfig = Field(default_factory=LandingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    public_dir: str | None = Field(
        default=None, description="Optional directory served verbatim under /public"
    )


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config format at {path}")
    return data


def load_server_config(environ: dict[str, str] | None = None) -> ServerConfig:
    """Load config from the JSON file named by UNILINKER_CONFIG, then apply env overrides.

    - Without a config file: defaults.
    - PORT and UNILINKER_BIND override the network section.
    - Validation is performed by Pydantic.
    """

    env = os.environ if environ is None else environ

    raw: dict[str, Any] = {}
    config_file = (env.get(CONFIG_ENV) or "").strip()
    if config_file:
        path = Path(config_file).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        raw = _read_json(path)

    network = dict(raw.get("network") or {})
    port = (env.get(PORT_ENV) or "").strip()
    if port:
        network["port"] = port
    bind = (env.get(BIND_ENV) or "").strip()
    if bind:
        network["bind_host"] = bind
    if network:
        raw["network"] = network

    return ServerConfig.model_validate(raw)
