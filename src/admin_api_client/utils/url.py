from typing import List, Optional, Sequence

from ..constants import CLIENT
from ..errors import RequestValidationError
from ..types import Logger, SearchParams
from .query import serialize_params
from .validation import validate_api_version


def format_api_path(path: str, api_version: str) -> str:
    """Shape a resource path into ``admin/api/<version>/<path>.json``.

    Paths that already start with ``admin`` keep their prefix, and paths that
    already end with ``.json`` keep their suffix.
    """
    if not path.startswith("admin"):
        path = f"admin/api/{api_version}/{path}"
    if not path.endswith(".json"):
        path = f"{path}.json"
    return path


class ApiUrlFormatter:
    """Builds fully qualified request URLs for one store."""

    def __init__(
        self,
        store_url: str,
        default_api_version: str,
        current_supported_api_versions: Sequence[str],
        logger: Optional[Logger] = None,
        format_paths: bool = True,
    ) -> None:
        """Initialize URL formatter.

        Args:
            store_url: Scheme and host, e.g. ``https://my-shop.myshopify.com``
            default_api_version: Version used when a call does not override it
            current_supported_api_versions: Versions a per-call override may use
            logger: Optional logger callback for unsupported version events
            format_paths: Whether to apply admin/api/<version>/ and .json shaping
        """
        self.store_url = store_url
        self.default_api_version = default_api_version
        self.current_supported_api_versions: List[str] = list(current_supported_api_versions)
        self.logger = logger
        self.format_paths = format_paths

    def __call__(
        self,
        path: str,
        search_params: Optional[SearchParams] = None,
        api_version: Optional[str] = None,
    ) -> str:
        """Return the request URL for ``path``.

        Raises:
            RequestValidationError: If ``api_version`` is given but not supported
        """
        if api_version:
            api_version = validate_api_version(
                CLIENT,
                self.current_supported_api_versions,
                api_version,
                logger=self.logger,
                error=RequestValidationError,
            )

        clean_path = path[1:] if path.startswith("/") else path
        if self.format_paths:
            clean_path = format_api_path(clean_path, api_version or self.default_api_version)

        return f"{self.store_url}/{clean_path}{serialize_params(search_params)}"
