"""Configuration objects for the Admin API Python client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .constants import DEFAULT_RETRY_WAIT_TIME, DEFAULT_TIMEOUT
from .types import CustomFetchApi, Logger


@dataclass(frozen=True)
class ClientConfig:
    store_domain: str
    api_version: str
    access_token: str = field(repr=False)
    user_agent_prefix: Optional[str] = None
    logger: Optional[Logger] = None
    custom_fetch_api: Optional[CustomFetchApi] = None
    retries: int = 0
    scheme: str = "https"
    default_retry_time: float = DEFAULT_RETRY_WAIT_TIME
    format_paths: bool = True
    timeout: float = DEFAULT_TIMEOUT  # seconds, used by the default requests transport


__all__ = ["ClientConfig"]
