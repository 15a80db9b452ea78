"""Logger factory for the ipcrypt package."""

import logging
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER_NAME = "ipcrypt"
LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"


def get_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Get a logger under the ``ipcrypt`` namespace.

    Attaches one stream handler, plus a file handler when ``log_file`` is
    given. Repeated calls for the same name reuse the existing handlers.

    Args:
        name: Logger name, prefixed with ``ipcrypt.`` unless already qualified
        log_file: Optional path of a log file to append to
        level: Logging level for the logger and its handlers

    Returns:
        Configured logging.Logger
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = Path(log_file).resolve()
        has_file = any(
            isinstance(h, logging.FileHandler)
            and Path(h.baseFilename) == log_path
            for h in logger.handlers
        )
        if not has_file:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
