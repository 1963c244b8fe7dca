from typing import Any, Callable, Dict, TypedDict

import requests

from .request import RequestInit


class LogContentType(TypedDict):
    type: str  # "HTTP-Response" | "HTTP-Retry" | "HTTP-Response-GraphQL-Deprecation-Notice" | "Unsupported_Api_Version"
    content: Dict[str, Any]


Logger = Callable[[LogContentType], None]

# (url, init) -> response; the default is backed by requests
CustomFetchApi = Callable[[str, RequestInit], requests.Response]
