"""
Logging setup for ``family_tree``.

Modules call ``get_logger("<component>")``. Callers holding another
``FTConfig`` pass it to ``configure_logging`` to rebuild the handlers.
"""

from family_tree.logging.logger import (
    BASE_LOGGER_NAME,
    active_logger_names,
    configure_logging,
    get_logger,
)

__all__ = [
    "BASE_LOGGER_NAME",
    "active_logger_names",
    "configure_logging",
    "get_logger",
]
