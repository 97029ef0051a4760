"""Run the development server: ``python -m dockerized_app``."""

from __future__ import annotations

import uvicorn

from dockerized_app.core.config import get_config


def main() -> None:  # noqa: D401 – entry-point
    config = get_config()
    # Reload should be False in production
    uvicorn.run(
        "dockerized_app.api.app:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )


if __name__ == "__main__":  # pragma: no cover – CLI only
    main()
