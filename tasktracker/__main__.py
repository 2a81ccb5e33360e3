from __future__ import annotations

import uvicorn

from .app import create_app
from .config import Settings
from .logging_setup import setup_logging


def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings)
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
