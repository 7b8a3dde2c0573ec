"""Run the API server: ``python -m task_manager``."""

import uvicorn

from .config import get_settings
from .logging_setup import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run("task_manager.main:app", host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
