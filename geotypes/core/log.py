import logging

from geotypes.core.settings import Settings

_LOGGER_CONFIGURED = False


def setup_logging(level: int | str | None = None) -> None:
    """Attach a console handler to the ``geotypes`` logger.

    Safe to call more than once; only the first call installs the handler.
    The package never calls this itself, applications opt in.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger('geotypes')
    logger.setLevel(level if level is not None else Settings.LOG_LEVEL)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=Settings.LOG_FORMAT, datefmt=Settings.LOG_DATE_FORMAT))
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``geotypes`` hierarchy, so ``setup_logging`` covers it."""
    if name != 'geotypes' and not name.startswith('geotypes.'):
        name = f'geotypes.{name}'
    return logging.getLogger(name)
