import sys

from loguru import logger

LOG_FORMAT = "{level}:{name}:{message}"
PACKAGE = "profanity_filter"


def configure_logging(level: str = "INFO", sink=None) -> int:
    """Route the package's log records at ``level`` and above to ``sink``.

    Replaces loguru's existing handlers, including its default DEBUG stderr
    sink, so each record is written once in ``LOG_FORMAT``. The package is
    silent until this is called. Returns the handler id for ``logger.remove``.
    """
    logger.remove()
    logger.enable(PACKAGE)
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
        filter=PACKAGE,
    )
