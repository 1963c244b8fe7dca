"""Unit tests for header composition, query serialization and URL formatting."""

import pytest

from admin_api_client import (
    ApiUrlFormatter,
    RequestValidationError,
    compose_headers,
    get_current_supported_api_versions,
    serialize_params,
)
from admin_api_client._version import __version__
from admin_api_client.utils import format_api_path, normalize_headers

STORE_URL = "https://my-shop.myshopify.com"
SUPPORTED = get_current_supported_api_versions()
DEFAULT_VERSION = SUPPORTED[3]


# Headers

def test_compose_headers_defaults():
    headers = compose_headers(None, "tok")

    assert headers == {
        "content-type": "application/json",
        "accept": "application/json",
        "x-shopify-access-token": "tok",
        "user-agent": f"Admin API Client v{__version__}",
    }


def test_compose_headers_with_prefix_and_custom_header():
    headers = compose_headers({"X-Custom": "v"}, "tok", "prefix")

    assert headers["x-shopify-access-token"] == "tok"
    assert headers["user-agent"] == f"prefix | Admin API Client v{__version__}"
    assert headers["user-agent"].endswith(f"Admin API Client v{__version__}")
    assert headers["x-custom"] == "v"


def test_compose_headers_caller_wins_on_collision():
    headers = compose_headers(
        {"CONTENT-TYPE": "text/plain", "X-Shopify-Access-Token": "other", "User-Agent": "my-app"},
        "tok",
        "prefix",
    )

    assert headers["content-type"] == "text/plain"
    assert headers["accept"] == "application/json"
    assert headers["x-shopify-access-token"] == "other"
    assert headers["user-agent"] == "my-app"


def test_compose_headers_preserves_insertion_order():
    headers = compose_headers({"X-B": "2", "X-A": "1"}, "tok")

    assert list(headers) == [
        "content-type",
        "accept",
        "x-shopify-access-token",
        "user-agent",
        "x-b",
        "x-a",
    ]


def test_normalize_headers_joins_sequences_and_stringifies():
    headers = normalize_headers({"X-List": ["a", "b", 3], "X-Number": 42, "X-Tuple": ("c",)})

    assert headers == {"x-list": "a, b, 3", "x-number": "42", "x-tuple": "c"}


def test_normalize_headers_later_case_variant_wins():
    assert normalize_headers({"X-Thing": "first", "x-thing": "second"}) == {"x-thing": "second"}


# Query strings

def test_serialize_params_empty():
    assert serialize_params({}) == ""
    assert serialize_params(None) == ""


def test_serialize_params_arrays_and_nested_objects():
    query = serialize_params({"ids": [1, 2], "filter": {"status": "open"}})

    assert query == "?ids%5B%5D=1&ids%5B%5D=2&filter%5Bstatus%5D=open"


def test_serialize_params_keeps_insertion_order():
    assert serialize_params({"z": 1, "a": 2, "m": 3}) == "?z=1&a=2&m=3"


def test_serialize_params_deeply_nested():
    query = serialize_params({"a": {"b": [{"c": "d"}, "e"]}})

    assert query == "?a%5Bb%5D%5B%5D%5Bc%5D=d&a%5Bb%5D%5B%5D=e"


def test_serialize_params_encodes_reserved_characters():
    assert serialize_params({"title": "shoes & socks", "q": "a=b"}) == "?title=shoes+%26+socks&q=a%3Db"


def test_serialize_params_scalar_forms():
    assert serialize_params({"published": True, "draft": False, "price": 9.5}) == (
        "?published=true&draft=false&price=9.5"
    )


def test_serialize_params_skips_none_and_empty_containers():
    assert serialize_params({"a": None, "ids": [], "filter": {}}) == ""


# URLs

def test_format_api_path():
    assert format_api_path("products", "2024-01") == "admin/api/2024-01/products.json"
    assert format_api_path("products.json", "2024-01") == "admin/api/2024-01/products.json"
    assert format_api_path("admin/oauth/access_scopes", "2024-01") == "admin/oauth/access_scopes.json"
    assert format_api_path("admin/api/2024-01/shop.json", "2024-01") == "admin/api/2024-01/shop.json"


def test_url_formatter_shapes_paths():
    formatter = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED)

    assert formatter("products.json") == f"{STORE_URL}/admin/api/{DEFAULT_VERSION}/products.json"
    assert formatter("/products") == f"{STORE_URL}/admin/api/{DEFAULT_VERSION}/products.json"


def test_url_formatter_does_not_prefix_admin_paths():
    formatter = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED)

    url = formatter("admin/custom/endpoint", {"page": 2})

    assert url == f"{STORE_URL}/admin/custom/endpoint.json?page=2"


def test_url_formatter_strips_only_one_leading_slash():
    formatter = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED, format_paths=False)

    assert formatter("/custom/path") == f"{STORE_URL}/custom/path"
    assert formatter("//custom") == f"{STORE_URL}//custom"


def test_url_formatter_without_path_formatting():
    formatter = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED, format_paths=False)

    assert formatter("products", {"ids": [1]}) == f"{STORE_URL}/products?ids%5B%5D=1"


def test_url_formatter_uses_version_override():
    formatter = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED)

    assert formatter("products", api_version=SUPPORTED[0]) == f"{STORE_URL}/admin/api/{SUPPORTED[0]}/products.json"


def test_url_formatter_rejects_unsupported_override():
    formatter = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED)

    with pytest.raises(RequestValidationError, match="2000-01"):
        formatter("products", api_version="2000-01")


def test_url_formatter_is_deterministic():
    first = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED)
    second = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED)
    params = {"ids": [1, 2], "filter": {"status": "open"}}

    assert first("orders", params) == second("orders", params) == first("orders", params)


def test_url_formatter_trims_padded_override():
    formatter = ApiUrlFormatter(STORE_URL, DEFAULT_VERSION, SUPPORTED)

    assert formatter("products", api_version=f" {SUPPORTED[1]} ") == (
        f"{STORE_URL}/admin/api/{SUPPORTED[1]}/products.json"
    )
