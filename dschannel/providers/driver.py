"""Driver import helpers."""

from __future__ import annotations

import importlib
import logging
from typing import Any

from dschannel.providers.exceptions import MissingDriverError

logger = logging.getLogger(__name__)


def resolve_driver_module(driver: str, aliases: dict[str, str] | None = None) -> str:
    """Map a driver identifier to an importable DB-API module name.

    JDBC driver class names (``com.mysql.cj.jdbc.Driver``) are translated
    through ``aliases``; anything else is taken as a module name.
    """
    driver = driver.strip()
    if aliases and driver in aliases:
        return aliases[driver]
    return driver


def import_driver_module(module_name: str, *, driver_name: str) -> Any:
    """Import a driver module, raising MissingDriverError with detail if it fails."""
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise MissingDriverError(
            driver_name,
            module_name=module_name,
            import_error=str(e),
        ) from e
    logger.debug(f"Loaded driver module {module_name} for {driver_name}")
    return module
