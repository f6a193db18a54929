import logging
from rich.logging import RichHandler

PACKAGE_LOGGER = "tencent_ai"


def configure_logging(level: int = logging.INFO, rich_tracebacks: bool = True) -> None:
    """
    Configure the root logger to render through rich.
    """
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=rich_tracebacks)]
    )


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger (after logging is configured).
    """
    return logging.getLogger(name)


# Libraries stay silent unless the application configures logging.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
