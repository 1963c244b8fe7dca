"""
Admin API Python client

A client for the versioned Admin REST API of a single store.
- Builds admin/api/<version>/<resource>.json URLs with nested query strings
- Composes access token, content type and User-Agent headers
- Delegates sending and retries to a pluggable fetch function (requests by default)
"""

from ._version import __version__
from .client import AdminRestApiClient, create_admin_rest_api_client
from .config import ClientConfig
from .constants import ACCESS_TOKEN_HEADER, CLIENT, RETRIABLE_STATUS_CODES
from .errors import AdminApiClientError, ConfigurationError, NetworkError, RequestValidationError
from .http import default_fetch_api, generate_http_fetch
from .types import (
    CustomFetchApi,
    HeaderOptions,
    LogContentType as LogContent,
    Logger,
    Method,
    RequestInit,
    RequestOptionsType as RequestOptions,
    RequestParams,
    SearchParams,
)
from .utils import (
    ApiUrlFormatter,
    compose_headers,
    get_current_supported_api_versions,
    serialize_params,
)

__all__ = [
    # Main client
    "AdminRestApiClient",
    "ClientConfig",
    "create_admin_rest_api_client",

    # Errors
    "AdminApiClientError",
    "ConfigurationError",
    "RequestValidationError",
    "NetworkError",

    # Request building
    "ApiUrlFormatter",
    "compose_headers",
    "serialize_params",
    "get_current_supported_api_versions",

    # Transport
    "default_fetch_api",
    "generate_http_fetch",

    # Types
    "CustomFetchApi",
    "HeaderOptions",
    "LogContent",
    "Logger",
    "Method",
    "RequestInit",
    "RequestOptions",
    "RequestParams",
    "SearchParams",

    # Constants
    "ACCESS_TOKEN_HEADER",
    "CLIENT",
    "RETRIABLE_STATUS_CODES",
    "__version__",
]
