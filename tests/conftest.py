from typing import Dict, Optional
from unittest.mock import Mock

import pytest
import requests

from admin_api_client import ClientConfig, get_current_supported_api_versions


STORE_DOMAIN = "my-shop.myshopify.com"
ACCESS_TOKEN = "shpat_test_token"


def make_response(status: int = 200, headers: Optional[Dict[str, str]] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.headers.update(headers or {})
    return response


@pytest.fixture()
def api_version() -> str:
    # Current quarter release, always in the supported list
    return get_current_supported_api_versions()[3]


@pytest.fixture()
def fetch_api() -> Mock:
    return Mock(return_value=make_response(200))


@pytest.fixture()
def config(api_version: str, fetch_api: Mock) -> ClientConfig:
    return ClientConfig(
        store_domain=STORE_DOMAIN,
        api_version=api_version,
        access_token=ACCESS_TOKEN,
        custom_fetch_api=fetch_api,
        default_retry_time=0,
    )
