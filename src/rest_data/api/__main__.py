"""
rest_data.api.__main__

Entrypoint for running the service via `python -m rest_data.api`.

Responsibilities:
- Load settings.
- Create the app with the default resources.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from rest_data.api.app import create_app
from rest_data.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Also installed as the `rest-data` console script (see pyproject.toml).
