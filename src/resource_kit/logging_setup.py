"""Console logging for applications embedding resource-kit."""

import logging
import os
from typing import Optional

from resource_kit.settings import get_settings

# Remote callbacks run on pool threads, so the thread name is part of every line
LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"
HTTP_LOGGERS = ("urllib3", "requests")


def resolve_level(level: Optional[str] = None) -> int:
    """Argument first, then RESOURCE_KIT_LOG_LEVEL, then settings; unknown names give INFO."""
    name = (level or os.getenv("RESOURCE_KIT_LOG_LEVEL") or get_settings().log_level).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> int:
    """
    Configure a console handler for the package and its HTTP stack.

    urllib3/requests connection chatter stays at WARNING unless DEBUG is requested.

    Returns:
        The level applied to the resource_kit logger
    """
    value = resolve_level(level)
    logging.basicConfig(level=value, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("resource_kit").setLevel(value)

    http_level = value if value <= logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
    return value
