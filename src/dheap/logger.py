import logging
import sys


LOGGER_LEVEL = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}

logger = logging.getLogger("dheap")


def setup_logging(verbosity: int = 0) -> None:
    """Configure the package logger for console use."""
    logging.basicConfig(
        format="%(levelname)-8s %(asctime)-12s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout
    )
    logger.setLevel(LOGGER_LEVEL[verbosity])
