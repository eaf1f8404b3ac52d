from __future__ import annotations

import logging

import uvicorn

from unilinker.app import create_app
from unilinker.config import load_server_config
from unilinker.registry import build_registry


def main() -> None:
    config = load_server_config()

    logging.basicConfig(
        level=config.logging.level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    registry = build_registry(config)
    app = create_app(config, registry)

    uvicorn.run(app, host=config.network.bind_host, port=config.network.port)


if __name__ == "__main__":
    main()
