from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_SERVER_CONFIG


def main() -> None:
    config = DEFAULT_SERVER_CONFIG
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("cocktailbar").info("Server running on http://localhost:%d", config.port)
    uvicorn.run("cocktailbar.app:app", host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
