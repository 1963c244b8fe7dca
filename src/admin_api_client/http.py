"""
Fetch-with-retry collaborator for the Admin API Python client.

The client hands each request here as an (url, init) tuple. Transport is
requests by default; any callable with the same shape can replace it.
"""

import logging
import math
import time
from typing import Callable, Dict, Iterable, Optional

import requests

from .constants import CLIENT, DEFAULT_RETRY_WAIT_TIME, DEFAULT_TIMEOUT, DEPRECATION_HEADER, RETRIABLE_STATUS_CODES
from .errors import NetworkError
from .types import CustomFetchApi, Logger, RequestInit, RequestParams

_logger = logging.getLogger(__name__)

HttpFetch = Callable[[RequestParams, int, int], requests.Response]


def to_wire_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Restore conventional casing on lowercase header names (content-type -> Content-Type)."""
    return {
        "-".join(part.capitalize() for part in key.split("-")): value
        for key, value in headers.items()
    }


def default_fetch_api(url: str, init: RequestInit, timeout: float = DEFAULT_TIMEOUT) -> requests.Response:
    """Send a request with the requests library."""
    return requests.request(
        init["method"],
        url,
        headers=to_wire_headers(init["headers"]),
        data=init.get("body"),
        timeout=timeout,
    )


def _retry_wait_time(response: Optional[requests.Response], default: float) -> float:
    retry_after = response.headers.get("Retry-After") if response is not None else None
    if retry_after:
        try:
            wait_time = float(retry_after)
        except ValueError:
            return default
        if math.isfinite(wait_time) and wait_time >= 0:
            return wait_time
    return default


def generate_http_fetch(
    client_logger: Logger,
    custom_fetch_api: Optional[CustomFetchApi] = None,
    client: str = CLIENT,
    default_retry_wait_time: float = DEFAULT_RETRY_WAIT_TIME,
    retriable_codes: Iterable[int] = RETRIABLE_STATUS_CODES,
) -> HttpFetch:
    """Build the fetch-with-retry function used by the client.

    Args:
        client_logger: Receives HTTP-Response, HTTP-Retry and deprecation events
        custom_fetch_api: Transport callable, defaults to requests
        client: Client name used in error messages
        default_retry_wait_time: Seconds to wait between attempts when the
            response has no usable Retry-After header
        retriable_codes: Status codes that trigger another attempt

    Returns:
        Callable taking (request_params, attempt, max_retries)
    """
    fetch_api = custom_fetch_api or default_fetch_api
    retriable = frozenset(retriable_codes)

    def http_fetch(request_params: RequestParams, count: int, max_retries: int) -> requests.Response:
        url, init = request_params
        max_tries = max_retries + 1

        while True:
            next_count = count + 1
            response: Optional[requests.Response] = None
            # Only transport failures are retried; logger callback errors propagate
            try:
                response = fetch_api(url, init)
            except Exception as e:
                if next_count > max_tries:
                    prefix = (
                        f"Attempted maximum number of {max_retries} network retries. Last message - "
                        if max_retries > 0
                        else ""
                    )
                    raise NetworkError(f"{client}: {prefix}{e}", attempts=count) from e
            else:
                client_logger({
                    "type": "HTTP-Response",
                    "content": {"request_params": request_params, "response": response},
                })

                if response.ok or response.status_code not in retriable or next_count > max_tries:
                    deprecation_notice = response.headers.get(DEPRECATION_HEADER, "")
                    if deprecation_notice:
                        client_logger({
                            "type": "HTTP-Response-GraphQL-Deprecation-Notice",
                            "content": {"request_params": request_params, "deprecation_notice": deprecation_notice},
                        })
                    return response

            wait_time = _retry_wait_time(response, default_retry_wait_time)
            _logger.debug("Retrying %s %s in %ss (attempt %d of %d)", init["method"], url, wait_time, count, max_retries)
            time.sleep(wait_time)
            client_logger({
                "type": "HTTP-Retry",
                "content": {
                    "request_params": request_params,
                    "last_response": response,
                    "retry_attempt": count,
                    "max_retries": max_retries,
                },
            })
            count = next_count

    return http_fetch
