import logging
from logging.handlers import RotatingFileHandler

from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_handlers: list[logging.Handler] = []


def configure_logging() -> None:
    """Console plus size-capped file logging on the root logger.

    Safe to call again (app restarts, tests): handlers installed by an
    earlier call are replaced, not stacked.
    """
    root = logging.getLogger()
    root.setLevel(settings.log_level.upper())

    for old in _handlers:
        root.removeHandler(old)
        old.close()
    _handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    # SD cards are small: 5 x 2 MB at most
    for handler in (
        logging.StreamHandler(),
        RotatingFileHandler(settings.log_file, maxBytes=2_000_000, backupCount=5),
    ):
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _handlers.append(handler)

    # gpiozero warns about every pin factory it skips
    logging.getLogger("gpiozero").setLevel(logging.WARNING)
