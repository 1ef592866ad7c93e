"""Logger naming and command line logging setup for Culebra.

Library modules only create loggers under the ``culebra`` namespace and never
attach handlers; the portability warnings raised while rendering reach
whatever handlers the application configured. The command line tool calls
configure_logging() to send them to stderr.

Example:
    >>> from culebra.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Literal %s forwarded verbatim", "true")
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "culebra"

CLI_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the culebra namespace.

    Args:
        name: Logger name (typically __name__); names outside the package
            are nested under ``culebra.``

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'culebra.mymodule'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Send culebra log records to stderr.

    Warnings (non-portable literals and operators) are always shown; parse and
    render details only with ``debug``. Only the ``culebra`` logger's level is
    changed, so other libraries keep their own verbosity. An application that
    already configured the root logger keeps its handlers.

    Returns:
        The ``culebra`` root logger
    """
    logging.basicConfig(format=CLI_FORMAT)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger
