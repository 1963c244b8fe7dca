from .headers import compose_headers, normalize_headers
from .logger import generate_client_logger
from .query import serialize_params
from .url import ApiUrlFormatter, format_api_path
from .versions import get_current_supported_api_versions

__all__ = [
    "ApiUrlFormatter",
    "compose_headers",
    "format_api_path",
    "generate_client_logger",
    "get_current_supported_api_versions",
    "normalize_headers",
    "serialize_params",
]
