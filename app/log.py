import logging
import sys

LOGGER_NAME = "user-api"
STARTUP_LOGGER_NAME = f"{LOGGER_NAME}.startup"


def log() -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "[%(asctime)s] (%(name)s) %(levelname)s :: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S %Z",
        )
        handler.setFormatter(formatter)
        log.addHandler(handler)

    if log.level == logging.NOTSET:
        log.setLevel(logging.INFO)

    return log


def startup_log() -> logging.Logger:
    """
    Child of the service logger, pinned at INFO so the bind line reaches
    stdout whatever LOG_LEVEL the service logger runs at.
    """
    log()
    startup = logging.getLogger(STARTUP_LOGGER_NAME)
    startup.setLevel(logging.INFO)
    return startup


def setup_logging(level: str) -> logging.Logger:
    logger = log()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
