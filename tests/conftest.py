from __future__ import annotations

import pytest

from unilinker.config import ServerConfig
from unilinker.registry import UniversityRegistry, build_registry


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig()


@pytest.fixture
def registry(config: ServerConfig) -> UniversityRegistry:
    return build_registry(config)
