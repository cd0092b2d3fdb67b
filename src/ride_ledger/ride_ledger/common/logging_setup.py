from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """Configure application logging.

    Logs go to stderr unless `log_file` is set; relative paths are resolved
    against the repository `logs/` directory.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    kwargs: dict = {"level": level, "format": LOG_FORMAT, "datefmt": LOG_DATEFMT}
    if log_file:
        path = Path(log_file)
        if not path.is_absolute():
            path = Path(__file__).resolve().parents[4] / "logs" / path
        path.parent.mkdir(parents=True, exist_ok=True)
        kwargs["filename"] = str(path)

    logging.basicConfig(**kwargs)
