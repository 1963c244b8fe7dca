"""
Admin API Python client - REST

Builds URLs, headers and bodies for the versioned Admin REST API and hands
each request to the fetch-with-retry collaborator.
"""

import json
from dataclasses import replace
from functools import partial
from typing import Any, Optional, Unpack

import requests

from .config import ClientConfig
from .constants import CLIENT, RETRIABLE_STATUS_CODES
from .errors import RequestValidationError
from .http import default_fetch_api, generate_http_fetch
from .types import HeaderOptions, Method, RequestInit, RequestOptionsType, SearchParams
from .utils.headers import compose_headers
from .utils.logger import generate_client_logger
from .utils.url import ApiUrlFormatter
from .utils.validation import (
    validate_api_version,
    validate_domain_and_get_store_url,
    validate_required_access_token,
    validate_retries,
    validate_server_side_usage,
)
from .utils.versions import get_current_supported_api_versions


class AdminRestApiClient:
    """Admin REST API client.

    Holds only state derived from the configuration at construction time, so
    one instance can be shared between threads.
    """

    def __init__(self, config: ClientConfig):
        """Initialize the client.

        Args:
            config: Client configuration including store domain, API version and access token

        Raises:
            ConfigurationError: If the token, retries, domain or API version are invalid
        """
        validate_server_side_usage()
        validate_required_access_token(config.access_token)
        validate_retries(CLIENT, config.retries)

        self.config = config
        self.current_supported_api_versions = get_current_supported_api_versions()
        store_url = validate_domain_and_get_store_url(CLIENT, config.store_domain)
        self.store_url = store_url.replace("https://", f"{config.scheme}://", 1)

        api_version = validate_api_version(
            CLIENT,
            self.current_supported_api_versions,
            config.api_version,
            logger=config.logger,
        )

        self.format_url = ApiUrlFormatter(
            self.store_url,
            api_version,
            self.current_supported_api_versions,
            logger=config.logger,
            format_paths=config.format_paths,
        )
        self.client_logger = generate_client_logger(config.logger)
        self.http_fetch = generate_http_fetch(
            self.client_logger,
            custom_fetch_api=config.custom_fetch_api or partial(default_fetch_api, timeout=config.timeout),
            client=CLIENT,
            default_retry_wait_time=config.default_retry_time,
            retriable_codes=RETRIABLE_STATUS_CODES,
        )

    def request(
        self,
        path: str,
        method: str,
        *,
        search_params: Optional[SearchParams] = None,
        headers: Optional[HeaderOptions] = None,
        data: Any = None,
        retries: Optional[int] = None,
        api_version: Optional[str] = None,
    ) -> requests.Response:
        """
        Make HTTP request to the Admin API.

        Args:
            path: Resource path (e.g., 'products' or '/admin/oauth/access_scopes.json')
            method: HTTP method
            search_params: Optional nested query parameters
            headers: Optional headers, these override the defaults
            data: Optional body; strings are sent as-is, anything else as JSON
            retries: Optional retry budget for this call
            api_version: Optional API version for this call

        Returns:
            The response returned by the fetch collaborator

        Raises:
            RequestValidationError: If retries or api_version are invalid
        """
        validate_retries(CLIENT, retries if retries is not None else 0, error=RequestValidationError)

        url = self.format_url(path, search_params, api_version)
        init: RequestInit = {
            "method": method,
            "headers": compose_headers(headers, self.config.access_token, self.config.user_agent_prefix),
        }

        body = data if data is None or isinstance(data, str) else json.dumps(data)
        if body:
            init["body"] = body

        return self.http_fetch(
            (url, init),
            1,
            retries if retries is not None else self.config.retries,
        )

    def get(self, path: str, **options: Unpack[RequestOptionsType]) -> requests.Response:
        """Send a GET request."""
        return self.request(path, Method.GET, **options)

    def put(self, path: str, **options: Unpack[RequestOptionsType]) -> requests.Response:
        """Send a PUT request."""
        return self.request(path, Method.PUT, **options)

    def post(self, path: str, **options: Unpack[RequestOptionsType]) -> requests.Response:
        """Send a POST request."""
        return self.request(path, Method.POST, **options)

    def delete(self, path: str, **options: Unpack[RequestOptionsType]) -> requests.Response:
        """Send a DELETE request."""
        return self.request(path, Method.DELETE, **options)


def create_admin_rest_api_client(config: Optional[ClientConfig] = None, **options: Any) -> AdminRestApiClient:
    """Create an Admin REST API client from a config or keyword options.

    Example:
        client = create_admin_rest_api_client(
            store_domain="my-shop.myshopify.com",
            api_version="2024-01",
            access_token="shpat_...",
        )
        response = client.get("products", search_params={"limit": 10})
    """
    if config is None:
        config = ClientConfig(**options)
    elif options:
        config = replace(config, **options)
    return AdminRestApiClient(config)
