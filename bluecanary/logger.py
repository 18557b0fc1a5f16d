import logging
import sys
from pathlib import Path

from bluecanary import env_vars

LOG_FORMAT = "%(asctime)s %(levelname)s:%(filename)s:%(lineno)d [%(name)s] -- %(message)s"


def init_logger(name: str, file_name: str | None = None) -> logging.Logger:
    """Return a logger writing to stdout, or to a file when BLUECANARY_LOGGING_PATH is set.

    Handlers are attached once per logger name.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    log_dir = env_vars.BLUECANARY_LOGGING_PATH
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(
            Path(log_dir) / (file_name or env_vars.BLUECANARY_LOGGING_FILE_NAME), encoding="utf-8"
        )
    else:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(env_vars.BLUECANARY_LOGGING_LEVEL.upper())
    logger.propagate = False
    return logger
