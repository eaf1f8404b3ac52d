from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from unilinker.config import ServerConfig, load_server_config


def test_load_server_config_defaults_when_unset() -> None:
    cfg = load_server_config({})
    assert isinstance(cfg, ServerConfig)
    assert cfg.network.port == 3000
    assert cfg.network.bind_host == "0.0.0.0"
    assert cfg.landing.fallback_timeout_ms == 2500
    assert cfg.registry.include_defaults is True


def test_port_env_overrides_default() -> None:
    cfg = load_server_config({"PORT": "8080", "UNILINKER_BIND": "127.0.0.1"})
    assert cfg.network.port == 8080
    assert cfg.network.bind_host == "127.0.0.1"


def test_empty_port_env_falls_back_to_default() -> None:
    assert load_server_config({"PORT": ""}).network.port == 3000


def test_invalid_port_is_rejected() -> None:
    with pytest.raises(ValidationError):
        load_server_config({"PORT": "not-a-port"})

    with pytest.raises(ValidationError):
        load_server_config({"PORT": "70000"})


def test_config_file_is_loaded_and_env_wins(tmp_path: Path) -> None:
    path = tmp_path / "unilinker.json"
    path.write_text(
        json.dumps(
            {
                "network": {"port": 4000, "bind_host": "127.0.0.1"},
                "landing": {"fallback_timeout_ms": 1000},
                "logging": {"level": "DEBUG"},
            }
        ),
        encoding="utf-8",
    )

    cfg = load_server_config({"UNILINKER_CONFIG": str(path)})
    assert cfg.network.port == 4000
    assert cfg.landing.fallback_timeout_ms == 1000
    assert cfg.logging.level == "DEBUG"

    cfg2 = load_server_config({"UNILINKER_CONFIG": str(path), "PORT": "5000"})
    assert cfg2.network.port == 5000
    assert cfg2.network.bind_host == "127.0.0.1"


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_server_config({"UNILINKER_CONFIG": str(tmp_path / "nope.json")})


def test_config_file_must_be_an_object(tmp_path: Path) -> None:
    path = tmp_path / "unilinker.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_server_config({"UNILINKER_CONFIG": str(path)})


def test_negative_fallback_timeout_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ServerConfig.model_validate({"landing": {"fallback_timeout_ms": -1}})


def test_log_level_is_validated_and_normalized() -> None:
    cfg = ServerConfig.model_validate({"logging": {"level": "debug"}})
    assert cfg.logging.level == "DEBUG"

    with pytest.raises(ValidationError):
        ServerConfig.model_validate({"logging": {"level": "verbose"}})


def test_unknown_log_level_in_config_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "unilinker.json"
    path.write_text(json.dumps({"logging": {"level": "loud"}}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_server_config({"UNILINKER_CONFIG": str(path)})
