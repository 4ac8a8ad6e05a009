import logging
import sys
from typing import Iterable, Optional, TextIO

# Third-party loggers that log every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "openai", "urllib3")


def setup_logger(
    name: str,
    log_level: str = "INFO",
    stream: Optional[TextIO] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> logging.Logger:
    """Attach a single console handler to the ``name`` logger.

    Module loggers (``logging.getLogger(__name__)``) propagate to it, so this
    is called once for the package root when the app starts.
    """
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for noisy in quiet:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)

    return logger
