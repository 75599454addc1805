import logging
import sys
from typing import Optional, Union

from app import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# Libraries whose INFO/DEBUG output drowns the pipeline steps
NOISY_LOGGERS = ("urllib3", "multipart", "python_multipart")


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging for the API and the CLI.

    `level` defaults to LOG_LEVEL from the environment; an unknown level
    name falls back to INFO. When uvicorn (or an earlier call) already
    installed a handler, only the levels are adjusted.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
