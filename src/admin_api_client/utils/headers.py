from typing import Dict, Optional

from ..constants import ACCESS_TOKEN_HEADER, CLIENT, DEFAULT_CLIENT_VERSION, DEFAULT_CONTENT_TYPE
from ..types import HeaderOptions


def normalize_headers(headers: HeaderOptions) -> Dict[str, str]:
    """Lowercase header names and flatten values to strings.

    Sequence values are joined with ", ". When two names differ only by case,
    the later one wins.
    """
    normalized: Dict[str, str] = {}
    for key, value in headers.items():
        if isinstance(value, (list, tuple)):
            normalized[key.lower()] = ", ".join(str(v) for v in value)
        else:
            normalized[key.lower()] = str(value)
    return normalized


def compose_headers(
    overrides: Optional[HeaderOptions],
    access_token: str,
    user_agent_prefix: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build request headers for the Admin API.

    Args:
        overrides: caller supplied headers, these win over the defaults
        access_token: token to send in the access token header
        user_agent_prefix: optional segment placed before the client name in User-Agent

    Returns:
        headers dictionary with lowercase names
    """
    request_headers = normalize_headers(overrides or {})

    segments = []
    if request_headers.get("user-agent"):
        segments.append(request_headers["user-agent"])
    if user_agent_prefix:
        segments.append(user_agent_prefix)
    segments.append(f"{CLIENT} v{DEFAULT_CLIENT_VERSION}")

    headers = normalize_headers({
        "Content-Type": DEFAULT_CONTENT_TYPE,
        "Accept": DEFAULT_CONTENT_TYPE,
        ACCESS_TOKEN_HEADER: access_token,
        "User-Agent": " | ".join(segments),
    })
    headers.update(request_headers)
    return headers
