"""Package-scoped loggers.

Every mdscan logger lives under the ``mdscan`` namespace so a host engine
can tune all of them with one ``logging.getLogger("mdscan").setLevel(...)``.
The namespace root carries a NullHandler: as a library, mdscan never emits
"No handlers could be found" noise and never configures output itself.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "mdscan"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name inside the mdscan namespace.

    ``__name__`` of a package module is already namespaced and is used as-is;
    any other name is nested under ``mdscan.``.

    Example:
        >>> get_logger("entities").name
        'mdscan.entities'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
