import logging
import re
import sys
from typing import Any, Optional, Sequence, Type
from urllib.parse import urlsplit

from ..constants import CLIENT, MAX_RETRIES, MIN_RETRIES
from ..errors import ConfigurationError
from ..types import Logger

_logger = logging.getLogger(__name__)


def validate_server_side_usage() -> None:
    """Refuse to run inside a browser runtime, where the access token would leak."""
    if sys.platform == "emscripten":
        raise ConfigurationError(
            f"{CLIENT}: this client should not be used in the browser"
        )


def validate_required_access_token(access_token: Optional[str]) -> None:
    if not access_token:
        raise ConfigurationError(f"{CLIENT}: an access token must be provided")


def validate_retries(
    client: str,
    retries: Any,
    error: Type[ConfigurationError] = ConfigurationError,
) -> None:
    """Check that a retry count is an integer between MIN_RETRIES and MAX_RETRIES."""
    if (
        isinstance(retries, bool)
        or not isinstance(retries, int)
        or retries < MIN_RETRIES
        or retries > MAX_RETRIES
    ):
        raise error(
            f'{client}: The provided "retries" value ({retries}) is invalid - '
            f"it cannot be less than {MIN_RETRIES} or greater than {MAX_RETRIES}"
        )


def validate_domain_and_get_store_url(client: str, store_domain: Any) -> str:
    """Validate a store domain and return its https origin.

    Args:
        client: Client name used in error messages
        store_domain: Domain as given by the caller, with or without scheme

    Returns:
        Store URL such as ``https://my-shop.myshopify.com``

    Raises:
        ConfigurationError: If the domain cannot be parsed into a host
    """
    message = f'{client}: a valid store domain ("{store_domain}") must be provided'
    if not store_domain or not isinstance(store_domain, str):
        raise ConfigurationError(message)

    trimmed_domain = store_domain.strip()
    if re.match(r"^https?://", trimmed_domain, re.IGNORECASE):
        protocol_url = trimmed_domain
    else:
        protocol_url = f"https://{trimmed_domain}"

    try:
        parsed = urlsplit(protocol_url)
        hostname = parsed.hostname
        port = parsed.port
    except ValueError as e:
        raise ConfigurationError(message) from e

    if not hostname or any(c.isspace() for c in hostname):
        raise ConfigurationError(message)

    if port and port != 443:
        return f"https://{hostname}:{port}"
    return f"https://{hostname}"


def validate_api_version(
    client: str,
    current_supported_api_versions: Sequence[str],
    api_version: Any,
    logger: Optional[Logger] = None,
    error: Type[ConfigurationError] = ConfigurationError,
) -> str:
    """Check that an API version is one of the currently supported versions.

    Unsupported versions are reported to the logger callback (or the module
    logger when no callback is configured) before the error is raised.

    Returns:
        The version with surrounding whitespace removed
    """
    version_error = f'{client}: the provided apiVersion ("{api_version}")'
    supported_version = (
        f"Currently supported API versions: {', '.join(current_supported_api_versions)}"
    )

    if not api_version or not isinstance(api_version, str):
        raise error(f"{version_error} is invalid. {supported_version}")

    trimmed_api_version = api_version.strip()
    if trimmed_api_version not in current_supported_api_versions:
        if logger:
            logger({
                "type": "Unsupported_Api_Version",
                "content": {
                    "api_version": api_version,
                    "supported_api_versions": list(current_supported_api_versions),
                },
            })
        else:
            _logger.warning("%s is likely deprecated or not supported", version_error)
        raise error(f"{version_error} is not supported. {supported_version}")

    return trimmed_api_version
