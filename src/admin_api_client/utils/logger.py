import logging
from typing import Optional

from ..types import LogContentType, Logger

_logger = logging.getLogger(__name__)


def generate_client_logger(logger: Optional[Logger] = None) -> Logger:
    """Wrap an optional logger callback so callers can always invoke it."""

    def client_logger(log_content: LogContentType) -> None:
        _logger.debug("%s: %s", log_content["type"], log_content["content"])
        if logger:
            logger(log_content)

    return client_logger
